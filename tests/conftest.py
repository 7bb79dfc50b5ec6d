import pytest


class StopLoop(Exception):
    pass


class StubMaster:
    """In-memory stand-in for the client returned by ``master_for``."""

    def __init__(self, failures=0):
        self.data = {}
        self.calls = []
        self.failures = failures

    def set(self, key, value):
        self.calls.append((key, value))
        if self.failures:
            self.failures -= 1
            raise ConnectionError('Connection refused')
        self.data[key] = value
        return True


class FakeClock:
    """Injected ``sleep`` that advances time and stops the loop at ``until``."""

    def __init__(self, until):
        self.now = 0.0
        self.until = until
        self.sleeps = []

    def __call__(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds
        if self.now >= self.until:
            raise StopLoop()


@pytest.fixture
def stub_master_factory():
    return StubMaster


@pytest.fixture
def stub_master(stub_master_factory):
    return stub_master_factory()


@pytest.fixture
def fake_clock():
    return FakeClock


@pytest.fixture
def run_until_stopped():
    import sentinel_writer

    def run(master, clock, interval=sentinel_writer.WRITE_INTERVAL):
        with pytest.raises(StopLoop):
            sentinel_writer.write_loop(master, interval=interval, sleep=clock)

    return run
