from typing import Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from .models import Finishing, PrimitiveRole, Template


PositiveInches = Optional[float]


class PartSpec(BaseModel):
    """
    Numeric description of one part. Unset dimensions are None.

    A zero or negative dimension raises ValidationError here, at construction.
    Leaving a required dimension unset is not an error: the resolver returns
    valid=False with an issue instead.
    """
    model_config = ConfigDict(frozen=True)

    template: Template
    width: PositiveInches = Field(default=None, gt=0)
    height: PositiveInches = Field(default=None, gt=0)
    diameter: PositiveInches = Field(default=None, gt=0)
    tri_base: PositiveInches = Field(default=None, gt=0)
    tri_height: PositiveInches = Field(default=None, gt=0)
    hole_diameter: PositiveInches = Field(default=None, gt=0)
    hole_offset: PositiveInches = Field(default=None, gt=0)


class Concrete(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["concrete"] = "concrete"
    spec: PartSpec


class Placeholder(BaseModel):
    """Generic template preview, drawn before any dimensions are entered."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["placeholder"] = "placeholder"
    template: Template


GeometryInput = Union[Concrete, Placeholder]


# --- Preview primitives (normalized 0-100 canvas) ---

class RectPrimitive(BaseModel):
    model_config = ConfigDict(frozen=True)

    shape: Literal["rect"] = "rect"
    role: PrimitiveRole = PrimitiveRole.OUTLINE
    preview: bool = False
    x: float
    y: float
    width: float
    height: float


class CirclePrimitive(BaseModel):
    model_config = ConfigDict(frozen=True)

    shape: Literal["circle"] = "circle"
    role: PrimitiveRole = PrimitiveRole.OUTLINE
    preview: bool = False
    cx: float
    cy: float
    r: float


class PolygonPrimitive(BaseModel):
    model_config = ConfigDict(frozen=True)

    shape: Literal["polygon"] = "polygon"
    role: PrimitiveRole = PrimitiveRole.OUTLINE
    preview: bool = False
    points: Tuple[Tuple[float, float], ...]


Primitive = Union[RectPrimitive, CirclePrimitive, PolygonPrimitive]


class GeometryResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    template: Optional[Template] = None
    valid: bool = False
    area: float = 0.0
    perimeter: float = 0.0
    hole_count: int = 0
    hole_cut_length: float = 0.0
    scale_factor: float = 1.0
    primitives: Tuple[Primitive, ...] = ()
    issues: Tuple[str, ...] = ()

    @property
    def total_cut_length(self) -> float:
        return self.perimeter + self.hole_cut_length


# --- Pricing ---

class PriceModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    cost_per_sq_inch: float = Field(gt=0)
    cut_speed_in_per_sec: float = Field(gt=0)


class QuantityTier(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    min_quantity: int = Field(ge=1)
    multiplier: float = Field(gt=0)


class FinishingSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    finishing: Finishing = Finishing.NONE
    powder_coat_color: str = ""
    custom_finish_description: str = ""


class TierPrice(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    min_quantity: int
    multiplier: float
    unit_cost: Optional[float] = None


class QuoteResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool = False
    estimable: bool = False
    manual_quote: bool = False  # "other" material or thickness
    base_unit_cost: Optional[float] = None
    unit_cost_by_tier: Tuple[TierPrice, ...] = ()
    selected_unit_cost: Optional[float] = None
    total_cost: Optional[float] = None
    issues: Tuple[str, ...] = ()


# --- Form snapshot ---

class QuoteInput(BaseModel):
    """
    Immutable snapshot of everything the customer has entered.
    Rebuilt on every change, never patched in place. Non-positive dimensions
    raise ValidationError; parse_form maps them to None before building one.
    """
    model_config = ConfigDict(frozen=True)

    template: Optional[Template] = None
    width: PositiveInches = Field(default=None, gt=0)
    height: PositiveInches = Field(default=None, gt=0)
    diameter: PositiveInches = Field(default=None, gt=0)
    tri_base: PositiveInches = Field(default=None, gt=0)
    tri_height: PositiveInches = Field(default=None, gt=0)
    hole_diameter: PositiveInches = Field(default=None, gt=0)
    hole_offset: PositiveInches = Field(default=None, gt=0)
    material: str = ""
    other_material: str = ""
    thickness: str = ""
    other_thickness: str = ""
    quantity: int = Field(default=1, ge=1)
    finishing: Finishing = Finishing.NONE
    powder_coat_color: str = ""
    custom_finish_description: str = ""

    def part_spec(self) -> Optional[PartSpec]:
        """PartSpec for the selected template, or None if no template yet."""
        if self.template is None:
            return None
        return PartSpec(
            template=self.template,
            width=self.width,
            height=self.height,
            diameter=self.diameter,
            tri_base=self.tri_base,
            tri_height=self.tri_height,
            hole_diameter=self.hole_diameter,
            hole_offset=self.hole_offset,
        )

    def finishing_spec(self) -> FinishingSpec:
        return FinishingSpec(
            finishing=self.finishing,
            powder_coat_color=self.powder_coat_color,
            custom_finish_description=self.custom_finish_description,
        )


class Quote(BaseModel):
    """Combined output for one snapshot: what to draw and what it costs."""
    model_config = ConfigDict(frozen=True)

    geometry: GeometryResult
    pricing: QuoteResult
