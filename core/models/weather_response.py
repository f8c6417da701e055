# -*- coding: utf-8 -*-
"""
Модели ответа OpenWeatherMap (текущая погода).

Все объекты неизменяемые и живут один цикл запрос/ответ.
Температура хранится в Кельвинах, скорость ветра в м/с, направление в градусах;
производные единицы считаются при чтении.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

DEFAULT_COUNTRY = "us"

# (верхняя граница сектора включительно, метка)
COMPASS_SECTORS = [
    (11.25, "N"),
    (33.75, "NNE"),
    (56.25, "NE"),
    (78.75, "ENE"),
    (101.25, "E"),
    (123.75, "ESE"),
    (146.25, "SE"),
    (168.75, "SSE"),
    (191.25, "S"),
    (213.75, "SSW"),
    (236.25, "SW"),
    (258.75, "WSW"),
    (281.25, "W"),
    (303.75, "WNW"),
    (326.25, "NW"),
    (348.75, "NNW"),
    (360.0, "N"),
]


def compass_label(degrees: float) -> str:
    """Возвращает одну из 16 меток румба для направления в градусах."""
    d = float(degrees)
    if d < 0 or d > 360:
        d %= 360
    for upper, label in COMPASS_SECTORS:
        if d <= upper:
            return label
    return "N"


def decode_timestamp(value: Any) -> datetime:
    """
    Явное декодирование Unix-времени (целое число секунд) в datetime (UTC).

    Raises:
        ValueError: если значение не целое число или вне диапазона платформы
    """
    if isinstance(value, bool):
        raise ValueError(f"Неверная метка времени: {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Неверная метка времени: {value!r}")
        value = int(value)
    try:
        seconds = int(value)
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        # OverflowError/OSError: за пределами time_t платформы
        raise ValueError(f"Неверная метка времени: {value!r}")


@dataclass(frozen=True)
class Temperature:
    kelvin: float = 0.0

    @property
    def celsius(self) -> float:
        return self.kelvin - 273.15

    @property
    def fahrenheit(self) -> float:
        return self.celsius * 9 / 5 + 32

    def __str__(self) -> str:
        return f"{self.fahrenheit:.2f}°F ({self.celsius:.2f}°C)"


@dataclass(frozen=True)
class Speed:
    """Скорость ветра в м/с (стандартные единицы API)."""
    meters_per_second: float = 0.0

    @property
    def kmh(self) -> float:
        return self.meters_per_second * 3.6

    @property
    def mph(self) -> float:
        return self.kmh * 0.621371


@dataclass(frozen=True)
class WindDirection:
    degrees: float = 0.0

    @property
    def label(self) -> str:
        return compass_label(self.degrees)

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class LocationQuery:
    """Свободный текст локации (город или индекс) и код страны."""
    text: str
    country: Optional[str] = None

    @classmethod
    def from_args(cls, args: List[str], default_country: Optional[str] = None) -> "LocationQuery":
        text = " ".join(a.strip() for a in args if a and a.strip())
        if "," in text:
            # Страна уже указана пользователем
            return cls(text=text)
        return cls(text=text, country=default_country or DEFAULT_COUNTRY)

    def to_query(self) -> str:
        if self.country:
            return f"{self.text}, {self.country}"
        return self.text


@dataclass(frozen=True)
class Coord:
    lat: float = 0.0
    lon: float = 0.0


@dataclass(frozen=True)
class Condition:
    id: int = 0
    main: str = ""
    description: str = ""
    icon: str = ""

    def simple_string(self) -> str:
        return f"{self.main} ({self.description})"


@dataclass(frozen=True)
class MainInfo:
    temp: Temperature = field(default_factory=Temperature)
    feels_like: Temperature = field(default_factory=Temperature)
    temp_min: Temperature = field(default_factory=Temperature)
    temp_max: Temperature = field(default_factory=Temperature)
    pressure: float = 0.0
    humidity: float = 0.0
    sea_level: float = 0.0
    ground_level: float = 0.0

    def min_max(self) -> str:
        return (
            f"{self.temp_max.fahrenheit:.2f}°F / {self.temp_min.fahrenheit:.2f}°F "
            f"({self.temp_max.celsius:.2f}°C / {self.temp_min.celsius:.2f}°C)"
        )


@dataclass(frozen=True)
class Wind:
    speed: Speed = field(default_factory=Speed)
    deg: WindDirection = field(default_factory=WindDirection)

    def __str__(self) -> str:
        return f"{self.deg} at {self.speed.mph:.1f} MPH ({self.speed.kmh:.1f} km/h)"


@dataclass(frozen=True)
class Precipitation:
    hour1: float = 0.0
    hour3: float = 0.0


@dataclass(frozen=True)
class SysInfo:
    country: str = ""
    sunrise: int = 0
    sunset: int = 0


@dataclass(frozen=True)
class WeatherReport:
    name: str
    dt: datetime
    id: int = 0
    coord: Coord = field(default_factory=Coord)
    weather: List[Condition] = field(default_factory=list)
    base: str = ""
    main: MainInfo = field(default_factory=MainInfo)
    visibility: float = 0.0
    wind: Wind = field(default_factory=Wind)
    clouds: float = 0.0
    rain: Precipitation = field(default_factory=Precipitation)
    snow: Precipitation = field(default_factory=Precipitation)
    sys: SysInfo = field(default_factory=SysInfo)
    timezone: int = 0

    def conditions(self) -> Condition:
        """Первое погодное условие или пустое, если API не вернул ни одного."""
        if self.weather:
            return self.weather[0]
        return Condition()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeatherReport":
        """
        Декодирует JSON-ответ API.

        Raises:
            ValueError: payload не является объектом или поля неверного типа
        """
        if not isinstance(data, dict):
            raise ValueError(f"Ожидался JSON-объект, получено: {type(data).__name__}")

        main = data.get("main") or {}
        wind = data.get("wind") or {}
        coord = data.get("coord") or {}
        rain = data.get("rain") or {}
        snow = data.get("snow") or {}
        sys_info = data.get("sys") or {}
        clouds = data.get("clouds") or {}

        return cls(
            id=int(data.get("id", 0)),
            name=str(data.get("name", "")),
            dt=decode_timestamp(data.get("dt", 0)),
            coord=Coord(lat=float(coord.get("lat", 0.0)), lon=float(coord.get("lon", 0.0))),
            weather=[
                Condition(
                    id=int(w.get("id", 0)),
                    main=str(w.get("main", "")),
                    description=str(w.get("description", "")),
                    icon=str(w.get("icon", "")),
                )
                for w in data.get("weather") or []
            ],
            base=str(data.get("base", "")),
            main=MainInfo(
                temp=Temperature(float(main.get("temp", 0.0))),
                feels_like=Temperature(float(main.get("feels_like", 0.0))),
                temp_min=Temperature(float(main.get("temp_min", 0.0))),
                temp_max=Temperature(float(main.get("temp_max", 0.0))),
                pressure=float(main.get("pressure", 0.0)),
                humidity=float(main.get("humidity", 0.0)),
                sea_level=float(main.get("sea_level", 0.0)),
                ground_level=float(main.get("grnd_level", 0.0)),
            ),
            visibility=float(data.get("visibility", 0.0)),
            wind=Wind(
                speed=Speed(float(wind.get("speed", 0.0))),
                deg=WindDirection(float(wind.get("deg", 0.0))),
            ),
            clouds=float(clouds.get("all", 0.0)),
            rain=Precipitation(hour1=float(rain.get("1h", 0.0)), hour3=float(rain.get("3h", 0.0))),
            snow=Precipitation(hour1=float(snow.get("1h", 0.0)), hour3=float(snow.get("3h", 0.0))),
            sys=SysInfo(
                country=str(sys_info.get("country", "")),
                sunrise=int(sys_info.get("sunrise", 0)),
                sunset=int(sys_info.get("sunset", 0)),
            ),
            timezone=int(data.get("timezone", 0)),
        )


@dataclass(frozen=True)
class ChatMessage:
    """Сообщение для хоста: notice (служебное) или text (результат)."""
    body: str
    msgtype: str = "m.text"

    @property
    def is_notice(self) -> bool:
        return self.msgtype == "m.notice"
