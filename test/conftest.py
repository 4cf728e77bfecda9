import logging

import pytest

import radixcodec


@pytest.fixture
def log() -> logging.Logger:
    """Create and configure a logger for tests"""
    log = logging.getLogger("radixcodec")
    log.setLevel(logging.DEBUG)
    return log


@pytest.fixture
def converter(log) -> radixcodec.RadixConverter:
    """Create a radix converter"""
    return radixcodec.RadixConverter(log=log)


@pytest.fixture
def codec(log, converter) -> radixcodec.Base58Codec:
    """Create a Base58 codec"""
    return radixcodec.Base58Codec(converter=converter, log=log)
