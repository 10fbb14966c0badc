"""Render the gunicorn and systemd files for one EditTutor deployment.

Templates live in `tooling/build/` and use `&NAME` placeholders. Rendered
copies are written to `<output-dir>/<version>/deploy/`.
"""

from __future__ import annotations

import argparse
import getpass
from pathlib import Path

APP_NAME = "EditTutor"

REPO_ROOT = Path(__file__).parent.resolve()
TEMPLATE_DIR = REPO_ROOT / "tooling" / "build"
TEMPLATE_NAMES = ("gunicorn.conf.py", "service.service")


def placeholder_values(
    username: str, project_path: str, version: str, port: int
) -> dict[str, str]:
    # &PROJECT_ROOT is the only value that gets joined with sub-paths
    return {
        "&PROJECT_ROOT": project_path.rstrip("/"),
        "&USERNAME": username,
        "&VERSION": version,
        "&APP_NAME": APP_NAME,
        "&LISTEN_PORT": str(port),
    }


def render_content(
    raw: str, username: str, project_path: str, version: str, port: int
) -> str:
    values = placeholder_values(username, project_path, version, port)
    for placeholder, value in values.items():
        raw = raw.replace(placeholder, value)
    return raw


def resolve_target(args: argparse.Namespace) -> tuple[str, str]:
    """Return (username, project_path) from the CLI flags."""
    if args.this:
        return getpass.getuser(), str(REPO_ROOT)
    if args.username and args.project_path:
        return args.username, args.project_path
    raise SystemExit("Provide both --username and --project-path, or use --this")


def follow_up_commands(username: str, project_path: str, version: str) -> list[str]:
    unit = f"{APP_NAME}.{version}.service"
    instance_dir = f"$PROJECT_ROOT/instance/{version}"
    return [
        f'export PROJECT_ROOT="{project_path}"',
        f'mkdir -p "{instance_dir}"',
        f'sudo ln -sf "{instance_dir}/deploy/service.service" /etc/systemd/system/{unit}',
        "sudo systemctl daemon-reload",
        f"sudo systemctl enable --now {unit}",
        f'sudo chown -R {username}:www-data "{instance_dir}" || true',
    ]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "--this",
        action="store_true",
        help="deploy as the current user from this checkout",
    )
    target.add_argument("--username", help="Linux user the service runs as")
    parser.add_argument(
        "--project-path",
        help="absolute checkout path on the server, e.g. /srv/edittutor",
    )
    parser.add_argument("--output-dir", default="instance", help="where rendered files go")
    parser.add_argument("--version", default="v1", help="deployment version tag")
    parser.add_argument("--port", type=int, default=5077, help="local port gunicorn binds")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    if args.this and args.project_path:
        raise SystemExit("--this already implies --project-path")
    username, project_path = resolve_target(args)

    deploy_dir = REPO_ROOT / args.output_dir / args.version / "deploy"
    deploy_dir.mkdir(parents=True, exist_ok=True)
    for name in TEMPLATE_NAMES:
        template = TEMPLATE_DIR / name
        if not template.is_file():
            raise FileNotFoundError(f"missing deploy template {template}")
        rendered = render_content(
            template.read_text(encoding="utf-8"), username, project_path, args.version, args.port
        )
        target = deploy_dir / name
        # Bytes keep the templates' LF line endings on every platform
        target.write_bytes(rendered.encode("utf-8"))
        print(f"Wrote {target}")

    print("\nOn the server, run:\n")
    print("\n".join(follow_up_commands(username, project_path.rstrip("/"), args.version)))


if __name__ == "__main__":
    main()
