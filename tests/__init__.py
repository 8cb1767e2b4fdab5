import unittest
import threading
import functools

import cosmsig
import cosmsig.logging
from cosmsig import constants
from cosmsig.logging import Logger


cosmsig.logging._configure_stderr_logging(verbosity="*")


class CosmsigTestCase(unittest.TestCase, Logger):
    """Base class for our unit tests."""

    TESTNET = False
    # maxDiff = None  # for debugging

    # some unit tests are modifying globals... so we run sequentially:
    _test_lock = threading.Lock()

    def __init__(self, *args, **kwargs):
        Logger.__init__(self)
        unittest.TestCase.__init__(self, *args, **kwargs)

    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        if cls.TESTNET:
            constants.CosmosHubTestnet.set_as_network()

    @classmethod
    def tearDownClass(cls):
        super().tearDownClass()
        if cls.TESTNET:
            constants.CosmosHubMainnet.set_as_network()

    def setUp(self):
        have_lock = self._test_lock.acquire(timeout=0.1)
        if not have_lock:
            # This can happen when trying to run the tests in parallel,
            # or if a prior test raised during `setUp` and never released the lock.
            raise Exception("timed out waiting for test_lock")
        super().setUp()

    def tearDown(self):
        super().tearDown()
        self._test_lock.release()


def as_network(net):
    """Function decorator to run a single unit test with another network selected.

    NOTE: this is inherently sequential; tests running in parallel would break things
    """
    def decorator(func):
        @functools.wraps(func)
        def run_test(*args, **kwargs):
            old_net = constants.net
            try:
                net.set_as_network()
                return func(*args, **kwargs)
            finally:
                constants.net = old_net
        return run_test
    return decorator
