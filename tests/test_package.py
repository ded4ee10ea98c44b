import logging

import scilib


def test_public_api_exposes_core_operations():
    assert scilib.mean(scilib.linear(0, 5, 6)) == 2.5
    assert str(scilib.SphericalPoint(1, 0.2, 2.1) * 2) == "r=2 :: theta=0.2 :: phi=2.1"


def test_package_logger_has_null_handler():
    handlers = logging.getLogger("scilib").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_get_info():
    info = scilib.get_info()
    assert info["version"] == scilib.get_version() == scilib.__version__
