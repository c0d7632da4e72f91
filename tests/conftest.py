import logging

import pytest

@pytest.fixture(autouse=True)
def reset_aocsolve_logger():
    # run_solution binds a handler to whatever sys.stderr is at the time,
    # which is a per-test capture stream
    yield
    logger = logging.getLogger("aocsolve")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
