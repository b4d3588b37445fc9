import logging

import alternatename.shared.logging as logging_module

from alternatename.shared.logging import (
    ColorFormatter,
    ContactRedactionFilter,
    get_logger,
    redact_contacts,
    setup_logging,
)


def test_redact_contacts():
    assert redact_contacts("mail jane.doe+x@example.co.uk now") == "mail [EMAIL] now"
    assert redact_contacts("no contacts here") == "no contacts here"


def test_contact_filter_replaces_message():
    filt = ContactRedactionFilter()
    record = logging.LogRecord("test", logging.INFO, "", 0, "user %s", args=("jane@example.com",), exc_info=None)
    assert filt.filter(record) is True
    assert record.getMessage() == "user [EMAIL]"


def test_contact_filter_leaves_clean_message():
    filt = ContactRedactionFilter()
    record = logging.LogRecord("test", logging.INFO, "", 0, "template %d", args=(1,), exc_info=None)
    assert filt.filter(record) is True
    assert record.args == (1,)


def test_color_formatter_preserves_level():
    fmt = ColorFormatter("%(levelname)s %(message)s")
    record = logging.LogRecord("test", logging.WARNING, "", 0, "msg", args=(), exc_info=None)
    formatted = fmt.format(record)
    assert "WARNING" in formatted
    assert record.levelname == "WARNING"


def test_setup_logging_idempotent():
    setup_logging()
    handlers = list(logging.getLogger().handlers)
    setup_logging()  # second call should not override handlers
    assert logging.getLogger().handlers == handlers
    assert get_logger("test_logger").name == "test_logger"


def test_setup_logging_reconfigures_after_reset():
    state = logging_module._state
    setup_logging()
    state.reset()
    assert state.configured is False
    setup_logging()
    assert state.configured is True
    assert len(logging.getLogger().handlers) == 1
