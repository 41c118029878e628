"""色空間とカラースケールのデータモデル。"""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field, RootModel

# カラースケールの固定ストップ（明→暗）
SCALE_STOPS: tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)


class RGB(BaseModel):
    """sRGBの各チャンネル（0〜255の整数）。"""

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


class HSL(BaseModel):
    """色相(0〜360度未満)・彩度・明度(0〜100%)。"""

    model_config = ConfigDict(frozen=True)

    h: float = Field(ge=0, lt=360)
    s: float = Field(ge=0, le=100)
    l: float = Field(ge=0, le=100)  # noqa: E741


class ColorScale(RootModel[dict[int, str]]):
    """ストップキー(50〜950)から16進カラーへの順序付きマッピング。"""

    model_config = ConfigDict(frozen=True)

    def __getitem__(self, stop: int) -> str:
        return self.root[stop]

    def __iter__(self) -> Iterator[int]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def items(self) -> list[tuple[int, str]]:
        return list(self.root.items())
