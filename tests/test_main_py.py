import importlib.util
import os


def _import_main_module(project_root):
    """Import main.py as a module without requiring it to be installed as a package."""
    main_path = os.path.join(project_root, "main.py")
    spec = importlib.util.spec_from_file_location("hello_service_main", main_path)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)  # type: ignore[attr-defined]
    return mod


def test_main_exposes_app_with_all_routes():
    project_root = os.path.dirname(os.path.dirname(__file__))
    main = _import_main_module(project_root)

    paths = {route.path for route in main.app.routes}
    assert {"/api/hello", "/api/version", "/health", "/ready"} <= paths


def test_run_uses_settings_defaults(monkeypatch):
    project_root = os.path.dirname(os.path.dirname(__file__))
    main = _import_main_module(project_root)

    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda target, **kw: calls.append((target, kw)))

    main.run()
    assert len(calls) == 1
    target, kw = calls[0]
    assert target is main.app
    assert kw["host"] == main.settings.host
    assert kw["port"] == main.settings.port
    assert kw["reload"] is False

    main.run(host="127.0.0.1", port=9000, reload=True)
    target, kw = calls[1]
    # reload needs an import string
    assert target == "main:app"
    assert kw["host"] == "127.0.0.1"
    assert kw["port"] == 9000


def test_run_keeps_explicit_falsy_host_and_port(monkeypatch):
    project_root = os.path.dirname(os.path.dirname(__file__))
    main = _import_main_module(project_root)

    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda target, **kw: calls.append(kw))

    # port 0 asks the OS for a free port
    main.run(host="", port=0)
    assert calls[0]["host"] == ""
    assert calls[0]["port"] == 0
