
class RouteNavError(Exception):
    """ Base class for all routenav errors"""
    pass

class RouteNavConfigError(RouteNavError):
    """ Raised when a setting has the wrong type or an unusable value"""

class RouteNavSearchError(RouteNavError):
    """ Raised when a file search cannot run, e.g. the search root is missing"""
