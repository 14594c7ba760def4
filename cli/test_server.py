from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from loguru import logger

from cli.server import create_app
from engine.bundle import INDEX_HTML, LOADER_RUNTIME
from engine.models import ProjectLayout


@pytest.fixture
def client(project: ProjectLayout) -> TestClient:
    return TestClient(create_app(project))


@pytest.fixture
def log_lines():
    lines = []
    sink = logger.add(lambda m: lines.append(str(m)), level="INFO")
    yield lines
    logger.remove(sink)


def test_index_page(client: TestClient):
    res = client.get("/")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    assert res.text == INDEX_HTML


def test_script_bundle(client: TestClient):
    res = client.get("/index.js")
    assert res.status_code == 200
    assert res.headers["content-type"] == "text/javascript; charset=utf-8"
    assert LOADER_RUNTIME.encode("utf-8") in res.content
    assert b'require.register("main"' in res.content


def test_style_bundle(client: TestClient):
    res = client.get("/index.css")
    assert res.status_code == 200
    assert res.headers["content-type"] == "text/css; charset=utf-8"
    assert res.content == b"body { margin: 0; }\n.btn { color: red; }\n"


def test_unknown_path_is_404(client: TestClient):
    res = client.get("/unknown.path")
    assert res.status_code == 404
    assert res.headers["content-type"].startswith("text/plain")
    assert res.text == "not found"


def test_other_methods_use_same_routes(client: TestClient):
    assert client.post("/").status_code == 200
    assert client.delete("/nested/thing").status_code == 404


def test_bundle_regenerated_per_request(client: TestClient, project: ProjectLayout):
    first = client.get("/index.js").content
    (project.app_root / "extra.js").write_bytes(b"exports.extra = true;\n")
    second = client.get("/index.js").content
    assert b'require.register("extra"' not in first
    assert b'require.register("extra"' in second


def test_file_sets_are_logged(client: TestClient, log_lines):
    client.get("/index.js")
    client.get("/index.css")
    assert any("JS FILES:" in line and "jquery.js" in line for line in log_lines)
    assert any("CSS FILES:" in line and "button.css" in line for line in log_lines)


def test_unreadable_module_answers_500(client: TestClient, project: ProjectLayout, monkeypatch):
    import engine.bundle.composer as composer

    real_open = open
    message = f"[Errno 2] No such file or directory: '{project.app_root / 'util.js'}'"

    def vanishing_open(path, mode="r", *args, **kwargs):
        if Path(path).name == "util.js":
            raise FileNotFoundError(message)
        return real_open(path, mode, *args, **kwargs)

    monkeypatch.setattr(composer, "open", vanishing_open, raising=False)

    res = client.get("/index.js")
    assert res.status_code == 500
    assert res.text == message
    assert LOADER_RUNTIME.encode("utf-8") not in res.content


def test_missing_styles_dir_is_empty_css(tmp_path: Path):
    client = TestClient(create_app(ProjectLayout(root=tmp_path)))
    res = client.get("/index.css")
    assert res.status_code == 200
    assert res.content == b""
