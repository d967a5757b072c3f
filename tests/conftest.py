"""Pytest fixtures for edgerouter-tools tests."""

import pytest
from pathlib import Path

# Smallest valid document: a root object and the three trailing lines
PERSON_BOOT = """person {
    name "John Doe"
    age 43
}
/* 1 */
/* 2 */
/* 3 */
"""

# Named instances next to a plain object of the same name
METRICS_BOOT = """person {
    metrics ideal {
        height 1.72
    }
    metrics {
        height 1.72
    }
}
/* 1 */
/* 2 */
/* 3 */
"""

# Router configuration in the layout the router writes it
ROUTER_BOOT = """interfaces {
    ethernet eth0 {
        address 192.168.0.1/24
        address 2001:44B8:4112:8A00::1/64
        description "WAN port"
        duplex auto
        speed auto
    }
    ethernet eth1 {
        disable
        duplex auto
    }
    loopback lo {
    }
}


/* Warning: Do not remove the following line. */
/* === vyatta-config-version: "config-management@1:system@5" === */
/* Release version: v2.0.9-hotfix.7.5622762.230615.1131 */
"""

# Same router configuration with uneven indentation and blank lines
MESSY_ROUTER_BOOT = """interfaces {
  ethernet eth0 {
          address 192.168.0.1/24

    address 2001:44B8:4112:8A00::1/64
  description "WAN port"
        duplex    auto
   speed auto
  }
 ethernet eth1 {
disable
  duplex auto
   }
    loopback lo {    }
}
/* Warning: Do not remove the following line. */
/* === vyatta-config-version: "config-management@1:system@5" === */
/* Release version: v2.0.9-hotfix.7.5622762.230615.1131 */
"""

# Every scalar kind
SCALARS_BOOT = """settings {
    quoted "some text"
    empty ""
    unquoted 1.72
    enabled true
    disabled false
    nothing null
    reserved "True"
    flag
}
/* a */
/* b */
/* c */
"""

TRAILER = "/* 1 */\n/* 2 */\n/* 3 */\n"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch) -> Path:
    """Run every test in an empty project directory without a user config."""
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    (workspace / ".git").mkdir()
    monkeypatch.chdir(workspace)
    monkeypatch.setattr("edgerouter_tools.config.USER_CONFIG_PATH", tmp_path / "no-user-config.toml")
    return workspace


@pytest.fixture
def person_text() -> str:
    return PERSON_BOOT


@pytest.fixture
def metrics_text() -> str:
    return METRICS_BOOT


@pytest.fixture
def router_text() -> str:
    return ROUTER_BOOT


@pytest.fixture
def messy_router_text() -> str:
    return MESSY_ROUTER_BOOT


@pytest.fixture
def scalars_text() -> str:
    return SCALARS_BOOT


@pytest.fixture
def person_boot(tmp_path: Path) -> Path:
    """Write the minimal person document to a temp file."""
    path = tmp_path / "person.boot"
    path.write_text(PERSON_BOOT)
    return path


@pytest.fixture
def router_boot(tmp_path: Path) -> Path:
    """Write the router configuration to a temp file."""
    path = tmp_path / "config.boot"
    path.write_text(ROUTER_BOOT)
    return path


@pytest.fixture
def messy_router_boot(tmp_path: Path) -> Path:
    """Write the unevenly formatted router configuration to a temp file."""
    path = tmp_path / "messy.boot"
    path.write_text(MESSY_ROUTER_BOOT)
    return path


@pytest.fixture
def broken_boot(tmp_path: Path) -> Path:
    """Write a document with a three-token setting on line 3."""
    path = tmp_path / "broken.boot"
    path.write_text("interfaces {\n    ethernet eth0 {\n        a b c\n    }\n}\n" + TRAILER)
    return path
