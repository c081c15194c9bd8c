from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr
from typing import Any, Dict, Optional, Union


EXTRACTION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "productName": {"type": "string"},
        "currentPrice": {"type": ["number", "string", "null"]},
        "currencyCode": {"type": ["string", "null"]},
        "productImageUrl": {"type": ["string", "null"]},
    },
    "required": ["productName"],
}

EXTRACTION_PROMPT = """
Extract:
- product name as "productName"
- product price as "currentPrice"
- currency code as "currencyCode"
- product image URL as "productImageUrl"

If price is not visible, return null for currentPrice.
""".strip()


class ProductRecord(BaseModel):
    """Product data as returned by the extraction service, field for field."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    product_name: StrictStr = Field(..., alias="productName", min_length=1, description="Product name")
    # strict types: values are kept as sent, anything outside the schema is rejected
    current_price: Optional[Union[StrictInt, StrictFloat, StrictStr]] = Field(
        None, alias="currentPrice", description="Price as shown on the page, None when not visible"
    )
    currency_code: Optional[StrictStr] = Field(None, alias="currencyCode", description="Currency (e.g., USD)")
    product_image_url: Optional[StrictStr] = Field(None, alias="productImageUrl", description="Product image URL")

    def to_payload(self) -> Dict[str, Any]:
        """Return the record keyed by wire names, with only the keys the service sent."""
        payload = self.model_dump(by_alias=True, exclude_unset=True)
        payload.update(self.model_extra or {})
        return payload
