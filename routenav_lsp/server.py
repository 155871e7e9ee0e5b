from __future__ import annotations

"""
A pygls-based Language Server for route-definition modules.

Features:
- Initialize: settings from initializationOptions, workspace root
- Text synchronization (full) and document store
- Code Lens: full URL path above each route/index/layout construct
- Definition: quoted page-module path under the cursor -> matching files in the project
- Hover: full URL path over a construct keyword
- Document Symbols: the route tree
- workspace/didChangeConfiguration: reload settings

Note: Columns coming out of routenav are code-point offsets; LSP positions are
UTF-16 code units, so we convert at this boundary.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from pygls.uris import from_fs_path, to_fs_path
from lsprotocol.types import (
    CodeLens,
    CodeLensParams,
    Command,
    DefinitionParams,
    DidChangeConfigurationParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    InitializeParams,
    LocationLink,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
    TextDocumentSyncKind,
)

from routenav import __version__
from routenav.config import RouteNavConfig, load_config
from routenav.errors import RouteNavConfigError, RouteNavSearchError
from routenav.navigation import (
    extract_path_at_position,
    find_project_root,
    is_routes_file,
    is_trigger_file,
    looks_like_path,
    search_files,
    search_pattern,
)
from routenav.reader.scanner import scan_tokens
from routenav.routes import position_from_offset, project_routes
from routenav.tree import build_tree, resolve_full_path
from routenav.types import RouteKind, RouteRecord, TreeNode

logger = logging.getLogger(__name__)


@dataclass
class DocumentState:
    text: str
    roots: List[TreeNode] = field(default_factory=list)
    routes: List[RouteRecord] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> DocumentState:
        roots = build_tree(scan_tokens(text))
        return cls(text=text, roots=roots, routes=project_routes(text, roots))


class RouteNavLanguageServer(LanguageServer):
    CMD_NAME = "routenav-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, __version__, text_document_sync_kind=TextDocumentSyncKind.Full)
        self.documents: Dict[str, DocumentState] = {}
        self.config: RouteNavConfig = load_config()
        self.workspace_root: Optional[str] = None

    def apply_settings(self, settings) -> None:
        try:
            self.config = self.config.with_settings(settings)
        except RouteNavConfigError as ex:
            # Keep the previous configuration
            logger.warning("Ignoring settings: %s", ex)
            return
        logger.info("Configuration updated: %s", self.config)


ls = RouteNavLanguageServer()


@ls.feature("initialize")
def on_initialize(params: InitializeParams):
    if params.workspace_folders:
        ls.workspace_root = to_fs_path(params.workspace_folders[0].uri)
    elif params.root_uri:
        ls.workspace_root = to_fs_path(params.root_uri)
    ls.apply_settings(params.initialization_options)


@ls.feature("workspace/didChangeConfiguration")
def on_change_configuration(params: DidChangeConfigurationParams):
    ls.apply_settings(params.settings)


# --- Text sync ---
@ls.feature("textDocument/didOpen")
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    ls.documents[uri] = DocumentState.from_text(params.text_document.text or "")


@ls.feature("textDocument/didChange")
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        # Full sync: the last change carries the whole document
        text = params.content_changes[-1].text
    else:
        text = ls.documents.get(uri, DocumentState("")).text
    ls.documents[uri] = DocumentState.from_text(text)


@ls.feature("textDocument/didClose")
def did_close(params: DidCloseTextDocumentParams):
    ls.documents.pop(params.text_document.uri, None)


# --- Position helpers ---

def _line_at(text: str, line: int) -> Optional[str]:
    lines = text.split("\n")
    if line >= len(lines):
        return None
    return lines[line]


def _utf16_column(line_text: str, column: int) -> int:
    return len(line_text[:column].encode("utf-16-le")) // 2


def _codepoint_column(line_text: str, utf16_column: int) -> int:
    units = 0
    for i, ch in enumerate(line_text):
        if units >= utf16_column:
            return i
        units += 2 if ord(ch) > 0xFFFF else 1
    return len(line_text)


def _lsp_position(text: str, offset: int) -> Position:
    line, col = position_from_offset(text, offset)
    return Position(line=line, character=_utf16_column(_line_at(text, line) or "", col))


def _record_range(text: str, record: RouteRecord) -> Range:
    line_text = _line_at(text, record.line) or ""
    span = record.highlight
    return Range(
        start=Position(line=span.line, character=_utf16_column(line_text, span.col_start)),
        end=Position(line=span.line, character=_utf16_column(line_text, span.col_end)),
    )


# --- Code Lens ---

def code_lenses(uri: str, state: DocumentState, config: RouteNavConfig) -> Optional[List[CodeLens]]:
    if not config.enable_code_lens:
        return None
    if not is_routes_file(to_fs_path(uri) or uri):
        return None
    lenses: List[CodeLens] = []
    for record in state.routes:
        # Display-only lens: an empty command id renders the title without an action
        lenses.append(
            CodeLens(
                range=_record_range(state.text, record),
                command=Command(title=record.full_path, command=""),
                data={"fullPath": record.full_path, "tooltip": f"Full URL path: {record.full_path}"},
            )
        )
    return lenses


@ls.feature("textDocument/codeLens")
def on_code_lens(params: CodeLensParams) -> Optional[List[CodeLens]]:
    uri = params.text_document.uri
    state = ls.documents.get(uri)
    if not state:
        return None
    return code_lenses(uri, state, ls.config)


# --- Definition ---

def definition_links(
    text: str,
    position: Position,
    fs_path: str,
    config: RouteNavConfig,
    workspace_root: Optional[str] = None,
) -> Optional[List[LocationLink]]:
    line_text = _line_at(text, position.line)
    if line_text is None:
        return None
    hit = extract_path_at_position(line_text, _codepoint_column(line_text, position.character))
    if hit is None:
        return None

    # Route segments like 'dashboard' are not files; only follow real module paths
    if not looks_like_path(hit.raw, config.file_extensions):
        return None
    pattern = search_pattern(hit.raw)
    if pattern is None:
        return None

    root = find_project_root(fs_path, workspace_root, config.project_markers)
    files = search_files(pattern, root, config)
    if not files:
        return None

    origin = Range(
        start=Position(line=position.line, character=_utf16_column(line_text, hit.start)),
        end=Position(line=position.line, character=_utf16_column(line_text, hit.end)),
    )
    top = Range(start=Position(line=0, character=0), end=Position(line=0, character=0))
    return [
        LocationLink(
            target_uri=from_fs_path(str(f)),
            target_range=top,
            target_selection_range=top,
            origin_selection_range=origin,
        )
        for f in files
    ]


@ls.feature("textDocument/definition")
def on_definition(params: DefinitionParams) -> Optional[List[LocationLink]]:
    uri = params.text_document.uri
    state = ls.documents.get(uri)
    fs_path = to_fs_path(uri)
    if not state or not fs_path:
        return None
    try:
        return definition_links(state.text, params.position, fs_path, ls.config, ls.workspace_root)
    except RouteNavSearchError as ex:
        logger.warning("Definition lookup skipped: %s", ex)
        return None
    except Exception:
        logger.exception("Error in definition provider for %s", uri)
        return None


# --- Hover ---

def hover_at(state: DocumentState, position: Position) -> Optional[Hover]:
    line_text = _line_at(state.text, position.line)
    if line_text is None:
        return None
    col = _codepoint_column(line_text, position.character)
    for record in state.routes:
        span = record.highlight
        if span.line == position.line and span.col_start <= col < span.col_end:
            return Hover(
                contents=MarkupContent(kind=MarkupKind.PlainText, value=f"Full URL path: {record.full_path}"),
                range=_record_range(state.text, record),
            )
    return None


@ls.feature("textDocument/hover")
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    return hover_at(state, params.position)


# --- Document Symbols ---

_SYMBOL_KINDS = {
    RouteKind.ROUTE: SymbolKind.Function,
    RouteKind.INDEX: SymbolKind.Function,
    RouteKind.LAYOUT: SymbolKind.Module,
    RouteKind.PREFIX: SymbolKind.Namespace,
}


def _node_symbol(text: str, node: TreeNode) -> DocumentSymbol:
    token = node.token
    start = _lsp_position(text, token.start)
    keyword_end = Position(line=start.line, character=start.character + len(token.kind.value))
    return DocumentSymbol(
        name=resolve_full_path(node),
        detail=token.kind.value,
        kind=_SYMBOL_KINDS[token.kind],
        range=Range(start=start, end=_lsp_position(text, token.end + 1)),
        selection_range=Range(start=start, end=keyword_end),
        children=[_node_symbol(text, child) for child in node.children],
    )


def document_symbols(state: DocumentState) -> List[DocumentSymbol]:
    return [_node_symbol(state.text, root) for root in state.roots]


@ls.feature("textDocument/documentSymbol")
def on_document_symbols(params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    uri = params.text_document.uri
    state = ls.documents.get(uri)
    if not state:
        return None
    if not is_trigger_file(uri, ls.config.trigger_file_patterns):
        return None
    return document_symbols(state)


def main():
    logging.basicConfig(level=logging.INFO)
    logger.info("Starting %s %s over stdio", RouteNavLanguageServer.CMD_NAME, __version__)
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
