"""Pydantic models for order submission payloads.

Fields are deliberately permissive: structural rules (required fields,
enumerations, lengths) live in the JSON Schema, not here.
"""

from pydantic import BaseModel, ConfigDict, Field


class Address(BaseModel):
    province: str | None = None
    city: str | None = None
    detail: str | None = None


class OrderInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    order_id: str | None = Field(None, alias="orderId")
    city_name: str | None = Field(None, alias="cityName")
    amount: float | None = None
    quantity: int | None = None
    order_type: str | None = Field(None, alias="orderType")
    customer_name: str | None = Field(None, alias="customerName")
    phone: str | None = None
    email: str | None = None
    address: Address | None = None
    tags: list[str] | None = None
    create_time: str | None = Field(None, alias="createTime")
    status: int | None = None


class OrderRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    order_info: OrderInfo | None = Field(None, alias="orderInfo")

    def to_json(self) -> str:
        """Serialise with wire names, omitting unset/null fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
