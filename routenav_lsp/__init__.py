"""Language server integration for routenav.

This package provides a pygls-based Language Server for route-definition
modules (routes.ts / routes.tsx / routes.js / routes.jsx):

- Code lenses showing the full URL path above every route, index and layout
- Go to definition on page-module strings such as './routes/home.tsx'
- Hover with the full URL path over a route keyword
- Document symbols mirroring the route tree

Note: The server does not evaluate user buffers; it re-reads the text on every change.
"""

__all__ = [
    "server",
]
