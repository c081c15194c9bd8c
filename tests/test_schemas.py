import unittest

from pydantic import ValidationError

from product_scraper.models.schemas import ProductRecord


class TestProductRecord(unittest.TestCase):

    def test_accepts_wire_names(self):
        record = ProductRecord(productName="Widget", currentPrice=19.99, currencyCode="USD")

        self.assertEqual(record.product_name, "Widget")
        self.assertEqual(record.current_price, 19.99)
        self.assertEqual(record.currency_code, "USD")
        self.assertIsNone(record.product_image_url)

    def test_accepts_python_names(self):
        record = ProductRecord(product_name="Widget", current_price="19.99")

        self.assertEqual(record.to_payload(), {"productName": "Widget", "currentPrice": "19.99"})

    def test_name_is_required(self):
        with self.assertRaises(ValidationError):
            ProductRecord(currentPrice=5)

    def test_name_must_not_be_empty(self):
        with self.assertRaises(ValidationError):
            ProductRecord(productName="")

    def test_image_url_is_not_normalized(self):
        record = ProductRecord(productName="Widget", productImageUrl="//cdn.example.com/w.png")

        self.assertEqual(record.product_image_url, "//cdn.example.com/w.png")

    def test_values_keep_their_type(self):
        payload = {"productName": "Widget", "currentPrice": 20, "currencyCode": "usd"}
        record = ProductRecord(**payload)

        self.assertIs(type(record.current_price), int)
        self.assertEqual(record.to_payload(), payload)

    def test_bool_price_is_rejected_not_coerced(self):
        with self.assertRaises(ValidationError):
            ProductRecord(productName="Widget", currentPrice=True)

    def test_non_string_fields_are_rejected(self):
        for payload in (
            {"productName": 123},
            {"productName": "Widget", "currencyCode": 5},
            {"productName": "Widget", "productImageUrl": ["https://example.com/w.png"]},
            {"productName": "Widget", "currentPrice": "19.99", "currencyCode": "USD", "productImageUrl": 0},
        ):
            with self.subTest(payload=payload):
                with self.assertRaises(ValidationError):
                    ProductRecord(**payload)


if __name__ == "__main__":
    unittest.main()
