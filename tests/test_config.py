"""Tests for options and logging setup."""

import io
import logging
import pytest
import tensorlib as tl
from tensorlib import config


class TestOptions:
    """Tests for the options registry."""

    def test_defaults(self):
        opts = tl.get_options()
        assert opts.echo_lookups is False
        assert opts.parallel is False
        assert opts.max_workers is None
        assert opts.default_dtype == tl.float64

    def test_set_options_returns_previous(self):
        previous = tl.set_options(parallel=True)
        assert previous.parallel is False
        assert tl.get_options().parallel is True

    def test_unknown_option(self):
        with pytest.raises(ValueError):
            tl.set_options(verbose=True)

    def test_invalid_max_workers(self):
        with pytest.raises(ValueError):
            tl.set_options(max_workers=0)

    def test_context_manager_restores(self):
        with tl.options(echo_lookups=True, max_workers=3) as opts:
            assert opts.echo_lookups is True
            assert tl.get_options().max_workers == 3
        assert tl.get_options().echo_lookups is False
        assert tl.get_options().max_workers is None

    def test_context_manager_restores_on_error(self):
        with pytest.raises(RuntimeError):
            with tl.options(parallel=True):
                raise RuntimeError("boom")
        assert tl.get_options().parallel is False

    def test_default_dtype(self):
        with tl.options(default_dtype=tl.int32):
            t = tl.Tensor([2])
        assert t.dtype == tl.int32

    def test_env_flag(self, monkeypatch):
        monkeypatch.setenv("TENSORLIB_ECHO_LOOKUPS", "yes")
        assert config._env_flag("TENSORLIB_ECHO_LOOKUPS") is True
        monkeypatch.setenv("TENSORLIB_ECHO_LOOKUPS", "0")
        assert config._env_flag("TENSORLIB_ECHO_LOOKUPS") is False


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_writes_to_stream(self):
        stream = io.StringIO()
        logger = tl.setup_logging("DEBUG", stream=stream)
        try:
            tl.Tensor([2], [1, 2])
            assert logger.level == logging.DEBUG
            assert "tensorlib.tensor - DEBUG - Initialized tensor shape=(2,)" in stream.getvalue()
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)

    def test_does_not_stack_handlers(self):
        logger = tl.setup_logging()
        tl.setup_logging()
        try:
            assert len(logger.handlers) == 1
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)
