import datetime
import io
import logging
import pathlib

import pytest

LOG_DIR = pathlib.Path(__file__).parent / "test-logs"


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    # Attach the TestReport to the item so fixtures can see the outcome in teardown.
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


@pytest.fixture(autouse=True)
def capture_separator_logs(request):
    """Capture the 'separator' logger family at DEBUG for each test and write
    the buffer to a file only when the test fails.
    """
    logger = logging.getLogger("separator")
    buf = io.StringIO()
    handler = logging.StreamHandler(buf)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    prev_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield
    finally:
        logger.removeHandler(handler)
        logger.setLevel(prev_level)
        rep = getattr(request.node, "rep_call", None)
        if rep is not None and rep.outcome == "failed":
            nodeid = request.node.nodeid.replace("::", "__").replace("/", "_")
            ts = datetime.datetime.now().strftime("%Y%m%dT%H%M%S")
            LOG_DIR.mkdir(exist_ok=True)
            fname = LOG_DIR / "{}__{}.log".format(nodeid, ts)
            with open(fname, "w", encoding="utf-8") as f:
                f.write("=== Test: {}\n".format(request.node.nodeid))
                f.write("=== Timestamp: {}\n\n".format(ts))
                f.write(buf.getvalue())


# Clockwise outlines (y axis up) shared by several test modules.

@pytest.fixture
def square():
    return [(0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0)]


@pytest.fixture
def l_hexagon():
    return [(0.0, 0.0), (0.0, 10.0), (5.0, 10.0), (5.0, 5.0), (10.0, 5.0), (10.0, 0.0)]


@pytest.fixture
def star():
    """Four-pointed star with its four reflex vertices at (+-5, +-5)."""
    return [(0.0, 20.0), (5.0, 5.0), (20.0, 0.0), (5.0, -5.0),
            (0.0, -20.0), (-5.0, -5.0), (-20.0, 0.0), (-5.0, 5.0)]


@pytest.fixture
def u_shape():
    return [(0.0, 0.0), (0.0, 10.0), (3.0, 10.0), (3.0, 3.0),
            (7.0, 3.0), (7.0, 10.0), (10.0, 10.0), (10.0, 0.0)]


@pytest.fixture
def bowtie():
    return [(0.0, 0.0), (10.0, 10.0), (10.0, 0.0), (0.0, 10.0)]
