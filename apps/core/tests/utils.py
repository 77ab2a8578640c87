from unittest import mock

from apps.core.backend import BackendError


class MockBackendMixin:
    """
    Replaces the event service client with a mock.

    Testcases can set backend_responses[path] to the data to return for a request to path, or to an exception to
    raise. Requests for other paths fail with a BackendError.
    """

    def setUp(self):
        super().setUp()

        # Create a fresh patch for each testcase, so things like assert_called work as expected.
        patcher = mock.patch('apps.core.backend.get_backend_client')
        self.get_backend_client = patcher.start()
        self.addCleanup(patcher.stop)

        self.backend = self.get_backend_client.return_value
        self.backend.get.side_effect = self.backend_get
        self.backend.post.side_effect = self.backend_post
        self.backend_responses = {}
        self.backend_posted = []

    def backend_get(self, path, **kwargs):
        return self.backend_reply(path)

    def backend_post(self, path, payload):
        self.backend_posted.append((path, payload))
        return self.backend_reply(path)

    def backend_reply(self, path):
        if path not in self.backend_responses:
            raise BackendError("Not found: {}".format(path), status_code=404)
        reply = self.backend_responses[path]
        if isinstance(reply, Exception):
            raise reply
        return reply

    def assert_posted(self, path):
        """ Returns the payloads posted to the given path (asserting there is at least one). """
        payloads = [payload for p, payload in self.backend_posted if p == path]
        self.assertTrue(payloads, "Nothing posted to {}".format(path))
        return payloads


class OfflineBackendMixin:
    """ Runs without an event service configured, i.e. on built-in data. """

    def setUp(self):
        super().setUp()

        patcher = mock.patch('apps.core.backend.get_backend_client', return_value=None)
        self.get_backend_client = patcher.start()
        self.addCleanup(patcher.stop)
