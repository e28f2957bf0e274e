"""Shared test fixtures for codeshape tests."""

from pathlib import Path

import pytest


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


def write_tree(root: Path, files: dict) -> Path:
    """Create ``files`` (relative path -> content) under ``root``.

    A path ending in ``/`` creates an empty directory.
    """
    for rel_path, content in files.items():
        target = root / rel_path
        if rel_path.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def project_builder(tmp_path):
    """Build a small source tree under a fresh temporary directory."""

    def build(files: dict, name: str = "project") -> Path:
        root = tmp_path / name
        root.mkdir(exist_ok=True)
        return write_tree(root, files)

    return build


@pytest.fixture
def mvc_project(project_builder):
    """Express-style MVC layout with a small import chain."""
    return project_builder(
        {
            "package.json": '{"name": "shop"}',
            "src/index.js": "import { router } from './routes/router';\nconst appName = 'shop';\n",
            "src/routes/router.js": (
                "import { listUsers } from '../controllers/userController';\n"
                "export const router = [listUsers];\n"
            ),
            "src/controllers/userController.js": (
                "import { findUsers } from '../models/userModel';\n"
                "export function listUsers() { return findUsers(); }\n"
            ),
            "src/models/userModel.js": (
                "const tableName = 'users';\n"
                "export function findUsers() { return []; }\n"
            ),
            "src/views/userView.js": "export function renderUsers(users) { return users; }\n",
        }
    )
