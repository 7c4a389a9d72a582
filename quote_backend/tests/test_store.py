import unittest
from unittest.mock import MagicMock, patch

import requests

from quote_backend.store import (
    InMemoryQuoteStore,
    QuoteRecord,
    RemoteStoreError,
    SupabaseQuoteStore,
)


def _response(status_code=200, payload=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


class SupabaseListQuotesTests(unittest.TestCase):
    def setUp(self):
        self.store = SupabaseQuoteStore(
            base_url="https://demo.supabase.co/", api_key="secret", timeout=5.0
        )

    @patch("quote_backend.store.requests.get")
    def test_list_decodes_rows(self, mock_get):
        mock_get.return_value = _response(
            payload=[
                {"id": 1, "text": "🔥 Go", "author": "Me", "created_at": "2024-01-01"},
                {"id": 2, "text": "Rest"},
            ]
        )
        quotes = self.store.list_quotes()
        self.assertEqual(
            quotes, [QuoteRecord(1, "🔥 Go", "Me"), QuoteRecord(2, "Rest", "")]
        )
        mock_get.assert_called_once_with(
            "https://demo.supabase.co/rest/v1/quotes",
            params={"select": "*"},
            headers={"apikey": "secret", "Authorization": "Bearer secret"},
            timeout=5.0,
        )

    @patch("quote_backend.store.requests.get")
    def test_non_200_is_no_data(self, mock_get):
        mock_get.return_value = _response(status_code=404, payload={"message": "nope"})
        self.assertIsNone(self.store.list_quotes())

    @patch("quote_backend.store.requests.get")
    def test_transport_error_raises(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("refused")
        with self.assertRaises(RemoteStoreError):
            self.store.list_quotes()

    @patch("quote_backend.store.requests.get")
    def test_invalid_json_raises(self, mock_get):
        mock_get.return_value = _response(json_error=ValueError("bad json"))
        with self.assertRaises(RemoteStoreError):
            self.store.list_quotes()

    @patch("quote_backend.store.requests.get")
    def test_non_list_payload_raises(self, mock_get):
        mock_get.return_value = _response(payload={"id": 1})
        with self.assertRaises(RemoteStoreError):
            self.store.list_quotes()

    @patch("quote_backend.store.requests.get")
    def test_wrong_typed_row_raises(self, mock_get):
        mock_get.return_value = _response(payload=[{"id": "one", "text": "x"}])
        with self.assertRaises(RemoteStoreError):
            self.store.list_quotes()


class SupabaseCreateQuoteTests(unittest.TestCase):
    def setUp(self):
        self.store = SupabaseQuoteStore(base_url="https://demo.supabase.co", api_key="k")

    @patch("quote_backend.store.requests.post")
    def test_create_sends_text_and_author(self, mock_post):
        mock_post.return_value = _response(status_code=201)
        self.store.create_quote("hi", "me")
        mock_post.assert_called_once_with(
            "https://demo.supabase.co/rest/v1/quotes",
            json={"text": "hi", "author": "me"},
            headers={
                "apikey": "k",
                "Authorization": "Bearer k",
                "Content-Type": "application/json",
            },
            timeout=None,
        )

    @patch("quote_backend.store.requests.post")
    def test_create_ignores_rejected_status(self, mock_post):
        mock_post.return_value = _response(status_code=400)
        with self.assertLogs("quote_backend.store", level="WARNING"):
            self.store.create_quote("hi", "me")

    @patch("quote_backend.store.requests.post")
    def test_create_transport_error_raises(self, mock_post):
        mock_post.side_effect = requests.Timeout("slow")
        with self.assertRaises(RemoteStoreError):
            self.store.create_quote("hi", "me")


class InMemoryQuoteStoreTests(unittest.TestCase):
    def test_create_assigns_ids(self):
        store = InMemoryQuoteStore()
        store.create_quote("a", "x")
        store.create_quote("b", "y")
        self.assertEqual([q.id for q in store.list_quotes()], [1, 2])

    def test_unavailable_returns_none(self):
        store = InMemoryQuoteStore(quotes=[QuoteRecord(1, "a")], available=False)
        self.assertIsNone(store.list_quotes())
        store.reset()
        self.assertEqual(store.list_quotes(), [])


class QuoteRecordTests(unittest.TestCase):
    def test_missing_fields_take_zero_values(self):
        self.assertEqual(QuoteRecord.from_dict({}), QuoteRecord(0, "", ""))

    def test_rejects_bool_id_and_non_objects(self):
        with self.assertRaises(ValueError):
            QuoteRecord.from_dict({"id": True})
        with self.assertRaises(ValueError):
            QuoteRecord.from_dict(["not", "a", "row"])


if __name__ == "__main__":
    unittest.main()
