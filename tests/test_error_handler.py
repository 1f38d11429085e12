import logging

from contract_api.database.errors import StorageError
from contract_api.error_handler import GENERIC_ERROR_MESSAGE, ErrorHandler


def test_handle_exception_returns_payload():
    eh = ErrorHandler()
    out = eh.handle_exception(Exception("boom"), context={"k": "v"})
    assert out == {"error": GENERIC_ERROR_MESSAGE}
    assert "internal error" in out["error"].lower()


def test_handle_exception_logs_message_and_cause(caplog):
    caplog.set_level(logging.ERROR, logger="contract_api.error_handler")
    try:
        try:
            raise ConnectionRefusedError("db down")
        except ConnectionRefusedError as e:
            raise StorageError("Contract store error") from e
    except StorageError as exc:
        ErrorHandler().handle_exception(exc)

    assert len(caplog.records) == 1
    text = caplog.text
    assert "Contract store error" in text
    assert "db down" in text
    assert caplog.records[0].exc_info is not None
