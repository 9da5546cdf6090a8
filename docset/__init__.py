"""
docset — budowanie pakietu {package}.docset.

Moduły:
  bundle       — układ katalogów, Info.plist, ikona
  index_store  — SQLite searchIndex (INSERT OR IGNORE)
  walker       — przejście źródeł, przetwarzanie HTML, kopiowanie reszty
"""

from .bundle import DocsetPaths, create_layout, docset_paths, install_icon, plist_data, write_plist
from .index_store import count_entries, create_index, insert_references
from .walker import BuildReport, DocumentFailure, build_documents, iter_source_files

__all__ = [
    "BuildReport",
    "DocsetPaths",
    "DocumentFailure",
    "build_documents",
    "count_entries",
    "create_index",
    "create_layout",
    "docset_paths",
    "insert_references",
    "install_icon",
    "iter_source_files",
    "plist_data",
    "write_plist",
]
