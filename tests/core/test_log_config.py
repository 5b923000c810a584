from app.core.log_config import logger

def test_logger_has_own_handler():
    assert logger.name == "messagely"
    assert logger.handlers
    assert logger.propagate is False
