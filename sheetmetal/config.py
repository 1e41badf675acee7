from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Shop markup applied to every base rate in the pricing tables
    PRICE_MARKUP: float = 1.75
    CUT_COST_PER_SECOND_BASE: float = 0.05
    MINIMUM_PART_COST_BASE: float = 1.50

    # Preview canvas: square viewBox, shapes fill it minus the padding
    PREVIEW_VIEWBOX_SIZE: float = 100.0
    PREVIEW_PADDING: float = 5.0

    class Config:
        env_file = ".env"
        env_prefix = "SHEETMETAL_"

    @property
    def cost_per_second_cutting(self) -> float:
        return self.CUT_COST_PER_SECOND_BASE * self.PRICE_MARKUP

    @property
    def minimum_part_cost(self) -> float:
        return self.MINIMUM_PART_COST_BASE * self.PRICE_MARKUP

    @property
    def preview_span(self) -> float:
        return self.PREVIEW_VIEWBOX_SIZE - (self.PREVIEW_PADDING * 2)


settings = Settings()
