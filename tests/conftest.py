from pathlib import Path

import pytest

from gogroup.classifier import GorootStdlibLookup
from gogroup.config import Settings

from tests.infrastructure.file_utils import make_goroot

STDLIB_PACKAGES = ["fmt", "os", "strings", "context", "net/http", "encoding/json"]

SELF_MODULE = "example.com/acme/app"
INTERNAL_DOMAIN = "git.corp.internal"


@pytest.fixture
def goroot(tmp_path: Path) -> Path:
    """Fake Go root with a handful of standard library packages."""
    return make_goroot(tmp_path / "goroot", STDLIB_PACKAGES)


@pytest.fixture
def lookup(goroot: Path) -> GorootStdlibLookup:
    return GorootStdlibLookup(goroot)


@pytest.fixture
def settings() -> Settings:
    return Settings(self_module=SELF_MODULE, internal_private_domains=(INTERNAL_DOMAIN,))


@pytest.fixture
def well_grouped_source() -> str:
    """All four groups, in order, one blank line apart (imports on lines 4-12)."""
    return (
        "package main\n"
        "\n"
        "import (\n"
        "\t\"fmt\"\n"
        "\t\"net/http\"\n"
        "\n"
        "\t\"github.com/pkg/errors\"\n"
        "\n"
        "\t\"git.corp.internal/platform/auth\"\n"
        "\n"
        "\t\"example.com/acme/app/internal/store\"\n"
        "\tcfg \"example.com/acme/app/config\"\n"
        ")\n"
        "\n"
        "func main() {}\n"
    )
