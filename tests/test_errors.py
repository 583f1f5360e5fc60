import unittest
from todomvc import create_app
from todomvc.config import TestingConfig
from todomvc.errors import InternalError, NotFound


class ErrorHandlingTestCase(unittest.TestCase):
    def setUp(self):
        self.app = create_app(TestingConfig)

        @self.app.route("/explode")
        def explode():
            raise RuntimeError("session store unavailable")

        @self.app.route("/internal")
        def internal():
            raise InternalError("could not write session")

        @self.app.route("/missing")
        def missing():
            raise NotFound()

        self.client = self.app.test_client()

    def test_unexpected_exception_becomes_internal_error(self):
        with self.assertLogs("todomvc.errors", level="ERROR"):
            response = self.client.get("/explode")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.get_data(as_text=True), "session store unavailable")
        self.assertTrue(response.content_type.startswith("text/plain"))

    def test_internal_error_carries_message(self):
        response = self.client.get("/internal")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.get_data(as_text=True), "could not write session")

    def test_not_found_has_fixed_message(self):
        response = self.client.get("/missing")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_data(as_text=True), "Not found")

    def test_routing_errors_pass_through(self):
        response = self.client.patch("/todos")
        self.assertEqual(response.status_code, 405)
        response = self.client.get("/nowhere")
        self.assertEqual(response.status_code, 404)

    def test_requests_are_logged(self):
        with self.assertLogs("todomvc.http", level="INFO") as logs:
            self.client.get("/")
        self.assertIn("GET / -> 200", logs.output[0])


if __name__ == '__main__':
    unittest.main()
