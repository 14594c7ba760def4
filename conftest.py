"""Shared fixtures: a small project tree on disk."""

from pathlib import Path
from typing import Dict

import pytest

from engine.models import ProjectLayout


def write_tree(root: Path, files: Dict[str, bytes]) -> None:
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)


SAMPLE_FILES = {
    "vendor/scripts/jquery.js": b"window.jQuery = window.$ = function() { return 'jq'; };",
    "vendor/scripts/README.md": b"not a script",
    "app/scripts/main.js": b"var util = require('./util');\nmodule.exports = { answer: util.VALUE };\n",
    "app/scripts/util.js": b"exports.VALUE = 42;\n",
    "app/scripts/views/list.js": b"var util = require('../util');\nexports.name = 'list:' + util.VALUE;\n",
    "app/styles/base.css": b"body { margin: 0; }",
    "app/styles/widgets/button.css": b".btn { color: red; }",
}


@pytest.fixture
def project(tmp_path: Path) -> ProjectLayout:
    write_tree(tmp_path, SAMPLE_FILES)
    return ProjectLayout(root=tmp_path)
