import logging

from eventcapture.logging import configure_logging


def test_configure_logging_scopes_to_package_logger():
    root = logging.getLogger()
    root_handlers = root.handlers[:]
    package = logging.getLogger("eventcapture")
    try:
        configure_logging("debug")
        configure_logging("debug")
        assert package.level == logging.DEBUG
        assert not package.propagate
        assert len(package.handlers) == 1
        assert "%(name)s" in package.handlers[0].formatter._fmt
        assert root.handlers == root_handlers
    finally:
        package.handlers.clear()
        package.setLevel(logging.NOTSET)
        package.propagate = True


def test_configure_logging_keeps_foreign_handlers():
    package = logging.getLogger("eventcapture")
    foreign = logging.NullHandler()
    package.addHandler(foreign)
    try:
        configure_logging("info")
        assert foreign in package.handlers
        assert len(package.handlers) == 2
    finally:
        package.handlers.clear()
        package.setLevel(logging.NOTSET)
        package.propagate = True
