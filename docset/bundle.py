"""
docset/bundle.py — struktura katalogu {package}.docset, Info.plist i ikona.

Układ:
  {package}.docset/
    icon.png
    Contents/
      Info.plist
      Resources/
        docSet.dsidx
        Documents/...
"""

from __future__ import annotations

import pathlib
import plistlib
import shutil
from dataclasses import dataclass

import requests

from data_model.config import DashingConfig


@dataclass(frozen=True, slots=True)
class DocsetPaths:
    root: pathlib.Path
    contents: pathlib.Path
    resources: pathlib.Path
    documents: pathlib.Path
    plist: pathlib.Path
    index_db: pathlib.Path
    icon: pathlib.Path


def docset_paths(output_dir: pathlib.Path, package: str) -> DocsetPaths:
    root      = output_dir / f"{package}.docset"
    contents  = root / "Contents"
    resources = contents / "Resources"
    return DocsetPaths(
        root=root,
        contents=contents,
        resources=resources,
        documents=resources / "Documents",
        plist=contents / "Info.plist",
        index_db=resources / "docSet.dsidx",
        icon=root / "icon.png",
    )


def create_layout(paths: DocsetPaths) -> None:
    paths.documents.mkdir(parents=True, exist_ok=True)


def plist_data(config: DashingConfig) -> dict[str, object]:
    return {
        "CFBundleIdentifier":   config.package,
        "CFBundleName":         config.name,
        "DocSetPlatformFamily": config.package,
        "isDashDocset":         True,
        "DashDocSetFamily":     "dashtoc",
        "dashIndexFilePath":    config.index,
        "isJavaScriptEnabled":  config.allow_js,
    }


def write_plist(config: DashingConfig, paths: DocsetPaths) -> None:
    paths.contents.mkdir(parents=True, exist_ok=True)
    with paths.plist.open("wb") as fh:
        plistlib.dump(plist_data(config), fh, sort_keys=False)


def install_icon(source: str, dest: pathlib.Path) -> None:
    """
    Kopiuje ikonę 32x32 PNG do docsetu.

    `source` to ścieżka do pliku (względna wobec katalogu roboczego)
    albo URL http(s).

    Raises:
        OSError / requests.RequestException gdy ikony nie da się pobrać.
    """
    dest.parent.mkdir(parents=True, exist_ok=True)

    if source.startswith(("http://", "https://")):
        resp = requests.get(source, timeout=30)
        resp.raise_for_status()
        dest.write_bytes(resp.content)
        return

    shutil.copyfile(source, dest)
