from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ScanRecordCreate(BaseModel):
    barcode: str = Field(..., min_length=1, description="Barcode value")
    productName: str = Field(..., min_length=1)
    brand: Optional[str] = None
    imageUrl: Optional[str] = None
    calories: Optional[float] = Field(None, strict=True, allow_inf_nan=False)

    model_config = ConfigDict(str_strip_whitespace=True)


class ScanRecord(ScanRecordCreate):
    id: str
    scannedAt: datetime


# Open Food Facts payload. Relayed verbatim, so unknown fields are kept.

class ProductNutrients(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    energy_100g: Optional[float] = None
    fat_100g: Optional[float] = None
    saturated_fat_100g: Optional[float] = Field(None, alias="saturated-fat_100g")
    carbohydrates_100g: Optional[float] = None
    sugars_100g: Optional[float] = None
    proteins_100g: Optional[float] = None
    fiber_100g: Optional[float] = None
    salt_100g: Optional[float] = None
    sodium_100g: Optional[float] = None


class Product(BaseModel):
    model_config = ConfigDict(extra="allow")

    code: str
    product_name: Optional[str] = None
    brands: Optional[str] = None
    image_url: Optional[str] = None
    categories: Optional[str] = None
    nutriments: Optional[ProductNutrients] = None
    serving_size: Optional[str] = None
    quantity: Optional[str] = None


class ProductResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: int
    product: Optional[Product] = None
    status_verbose: Optional[str] = None


class BmiQuery(BaseModel):
    weight: float = Field(..., ge=30, le=200, description="Weight in kg")
    height: float = Field(..., ge=100, le=220, description="Height in cm")
    gender: Literal["Male", "Female"] = "Male"
    dietType: Literal["Vegan", "Vegetarian", "Non-Veg"] = "Vegetarian"
    age: Optional[int] = Field(None, ge=1, le=100)


class BmiResult(BaseModel):
    bmi: float
    status: Literal["Healthy", "Not Healthy", "Obese"]
    plan: List[str]
