"""Pytest config"""

import logging

import pytest

from tests.utils import SAMPLE_PO


def pytest_addoption(parser):
    """Pytest hook that adds command line options"""
    parser.addoption(
        "--disable-logging",
        action="store_true",
        default=False,
        help="Disable all logging during test run",
    )


def pytest_configure(config):
    """Pytest hook that runs after command line options have been parsed"""
    if config.getoption("--disable-logging"):
        logging.disable(logging.CRITICAL)


@pytest.fixture
def write_po(tmp_path):
    """Factory writing PO content to a file under tmp_path"""

    def _write_po(content, name="django.po"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write_po


@pytest.fixture
def po_file(write_po):
    """The sample PO file on disk"""
    return write_po(SAMPLE_PO)
