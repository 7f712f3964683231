"""Tests for the display configuration."""

import logging

import pytest

import fluentiter as fi


def test_defaults() -> None:
    """Test the default settings."""
    config = fi.get_config()
    assert config.seq_repr_max_items == 20
    assert config.show_iter_source is False


def test_set_config_returns_previous() -> None:
    """Test set_config swaps the config and returns the old one."""
    previous = fi.set_config(seq_repr_max_items=1)
    try:
        assert fi.get_config().seq_repr_max_items == 1
        assert repr(fi.Seq([1, 2])) == "Seq(1, ...)"
    finally:
        fi.set_config(seq_repr_max_items=previous.seq_repr_max_items)
    assert fi.get_config() == previous


def test_unknown_key_raises() -> None:
    """Test unknown config fields are rejected."""
    with pytest.raises(TypeError, match="colour"):
        fi.set_config(colour="red")


def test_config_context_restores_on_error() -> None:
    """Test config_context restores the previous config even on failure."""
    before = fi.get_config()
    with pytest.raises(KeyError), fi.config_context(show_iter_source=True):
        assert repr(fi.Iter([1])) == "Iter(<list_iterator>)"
        raise KeyError("x")
    assert fi.get_config() == before
    assert repr(fi.Iter([1])) == "Iter()"


def test_config_is_frozen() -> None:
    """Test the config object cannot be mutated in place."""
    with pytest.raises(AttributeError):
        fi.get_config().show_iter_source = True  # type: ignore[misc]


def test_changes_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Test config changes emit debug records."""
    with caplog.at_level(logging.DEBUG, logger="fluentiter"), fi.config_context(seq_repr_max_items=5):
        pass
    messages = [record.getMessage() for record in caplog.records]
    assert any(msg.startswith("config updated") for msg in messages)
    assert any(msg.startswith("config restored") for msg in messages)
