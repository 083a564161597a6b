"""On-disk stand-in for a checkout of the go-native template."""

from __future__ import annotations

from pathlib import Path

TEMPLATE_FILES: dict[str, str] = {
    "server/go.mod": "module github.com/brightsidedeveloper/go-native-template\n\ngo 1.22\n",
    "server/internal/auth/jwt.go": (
        'import "github.com/brightsidedeveloper/go-native-template/internal/db"\n'
        'const issuer = "loop-app"\n'
    ),
    "server/internal/db/db_test.go": 'const testDB = "loop_test"\n',
    "server/config/email.go": 'From: "noreply@template.app" // Template mailer\n',
    "server/notes.txt": "nothing to replace here\n",
    "mobile/app.json": (
        "{\n"
        '  "expo": {\n'
        '    "name": "template",\n'
        '    "slug": "template",\n'
        '    "scheme": "template"\n'
        "  }\n"
        "}\n"
    ),
    "mobile/package.json": '{\n  "name": "template",\n  "version": "1.0.0"\n}\n',
    "Readme.md": "# Template\n\nA template project.\n",
    ".git/HEAD": "ref: refs/heads/main\n",
}

PNG_BYTES = b"\x89PNG\r\n\x1a\nTemplate loop-app"


def write_template_tree(root: Path) -> Path:
    for rel_path, content in TEMPLATE_FILES.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    (root / "server" / "static").mkdir(parents=True)
    (root / "server" / "static" / "logo.png").write_bytes(PNG_BYTES)
    return root
