"""Tests for deployment file generation."""

from __future__ import annotations

import pytest

import setup_deploy


def test_render_content_replaces_placeholders():
    raw = 'bind = "127.0.0.1:&LISTEN_PORT"\nchdir = "&PROJECT_ROOT"\nlog = "&PROJECT_ROOT/instance/&VERSION/&APP_NAME.log"\nuser = "&USERNAME"\n'

    out = setup_deploy.render_content(raw, "alice", "/srv/edittutor/", "v2", 8080)

    assert 'bind = "127.0.0.1:8080"' in out
    assert 'chdir = "/srv/edittutor"' in out
    assert 'log = "/srv/edittutor/instance/v2/EditTutor.log"' in out
    assert 'user = "alice"' in out
    assert "&" not in out


def test_main_writes_rendered_templates(tmp_path, capsys):
    setup_deploy.main(
        [
            "--username", "alice",
            "--project-path", "/srv/edittutor",
            "--output-dir", str(tmp_path),
            "--port", "6001",
        ]
    )

    gunicorn_conf = (tmp_path / "v1" / "deploy" / "gunicorn.conf.py").read_text(encoding="utf-8")
    service = (tmp_path / "v1" / "deploy" / "service.service").read_text(encoding="utf-8")
    assert 'bind = "127.0.0.1:6001"' in gunicorn_conf
    assert 'wsgi_app = "tutorial_agent.wsgi:app"' in gunicorn_conf
    assert "User=alice" in service
    assert "/srv/edittutor/instance/v1/deploy/gunicorn.conf.py" in service
    assert "systemctl enable --now EditTutor.v1.service" in capsys.readouterr().out


def test_main_requires_target():
    with pytest.raises(SystemExit):
        setup_deploy.main(["--username", "alice"])


def test_this_conflicts_with_explicit_target():
    with pytest.raises(SystemExit):
        setup_deploy.main(["--this", "--username", "alice"])


def test_this_conflicts_with_project_path():
    with pytest.raises(SystemExit):
        setup_deploy.main(["--this", "--project-path", "/srv/edittutor"])


def test_placeholder_values_strip_trailing_slash():
    values = setup_deploy.placeholder_values("bob", "/opt/app///", "v3", 7000)

    assert values["&PROJECT_ROOT"] == "/opt/app"
    assert values["&LISTEN_PORT"] == "7000"
    assert values["&APP_NAME"] == "EditTutor"
