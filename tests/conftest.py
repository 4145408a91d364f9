# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Pytest configuration and shared helpers for the unlocker test suite.

Helpers build small X4-like save documents and write them gzip-compressed, the
way the game does, so tests can run the pipeline against real files.
"""

from __future__ import annotations

import gzip
import xml.etree.ElementTree as ET
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from marketeer.config import Config, MutableConfig
from marketeer.config import logging as mlogging

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    return as_typed_mark(pytest.mark.parametrize(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_marketeer_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via the environment during tests."""
    monkeypatch.delenv("MARKETEER_LOG_LEVEL", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Log at TRACE level so failing tests show full pipeline diagnostics."""
    mlogging.setup_logging(level=mlogging.TRACE_LEVEL)


# --- Save document builders -------------------------------------------------


def marketeer_xml(
    *,
    flags: str | None = "tradedock",
    stockid: str = "default_shadyguy",
    owner: str | None = "argon",
    name: str | None = "Shady Guy",
    code: str | None = "XYZ-001",
    traits: bool = True,
) -> str:
    """Return a ``component`` element for an NPC, as it appears in X4 saves."""
    attrs = ['class="npc"', f'stockid="{stockid}"']
    if owner is not None:
        attrs.append(f'owner="{owner}"')
    if name is not None:
        attrs.append(f'name="{name}"')
    if code is not None:
        attrs.append(f'code="{code}"')
    if not traits:
        inner = ""
    elif flags is None:
        inner = "<traits/>"
    else:
        inner = f'<traits flags="{flags}"/>'
    return f"<component {' '.join(attrs)}>{inner}</component>"


def save_xml(*components: str) -> str:
    """Wrap NPC components in a minimal ``savegame`` document."""
    body = "".join(components)
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        '<savegame><info><save name="test"/></info><universe>'
        '<component class="galaxy" code="GAL-001"><connections>'
        '<connection connection="station"><component class="station" code="STA-001">'
        f'<connections><connection connection="npc">{body}</connection></connections>'
        "</component></connection></connections></component>"
        "</universe></savegame>"
    )


def write_save(path: Path, xml_text: str) -> Path:
    """Write ``xml_text`` gzip-compressed to ``path`` and return the path."""
    path.write_bytes(gzip.compress(xml_text.encode("utf-8")))
    return path


def read_save(path: Path) -> ET.Element:
    """Decompress and parse a save file, returning its root element."""
    return ET.fromstring(gzip.decompress(path.read_bytes()))


def traits_flags(root: ET.Element) -> list[str | None]:
    """Return the ``traits/@flags`` of every marketeer in document order."""
    out: list[str | None] = []
    for comp in root.iter("component"):
        if comp.get("stockid") != "default_shadyguy":
            continue
        traits = comp.find("traits")
        out.append(traits.get("flags") if traits is not None else None)
    return out


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides."""
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


@pytest.fixture
def save_file(tmp_path: Path) -> Path:
    """A save with one locked marketeer (``flags="tradedock"``)."""
    return write_save(tmp_path / "quicksave.xml.gz", save_xml(marketeer_xml()))
