from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from trenako_seeding.env import MAX_DEPTH_ENVVAR, SOURCE_ENVVAR
from trenako_seeding.logging_utils import logger

BRAND: dict[str, Any] = {
    "name": "ACME",
    "registered_company_name": "Associazione Costruzioni Modellistiche Esatte",
    "organization_entity_type": "OTHER",
    "group_name": None,
    "description": {"it": None, "en": None},
    "address": {
        "street_address": "Viale Lombardia, 27",
        "extended_address": None,
        "postal_code": "20131",
        "city": "Milano",
        "region": "MI",
        "country": "IT",
    },
    "contact_info": {
        "email": "mail@acmetreni.com",
        "phone": None,
        "website_url": "http://www.acmetreni.com",
    },
    "socials": {
        "facebook": None,
        "instagram": None,
        "linkedin": None,
        "twitter": None,
        "youtube": None,
    },
    "kind": "INDUSTRIAL",
    "status": "ACTIVE",
}

CATALOG_ITEM: dict[str, Any] = {
    "brand": "ACME",
    "item_number": "60023",
    "scale": "H0",
    "category": "LOCOMOTIVES",
    "description": {
        "it": "XMPR FS Trenitalia logo verde/rosso, corrimani e prese frontali",
        "en": None,
    },
    "details": {"it": None, "en": None},
    "power_method": "DC",
    "delivery_date": "2022",
    "availability_status": "AVAILABLE",
    "rolling_stocks": [
        {
            "category": "LOCOMOTIVE",
            "class_name": "E402 A",
            "road_number": "E402 031",
            "series": "",
            "locomotive_type": "ELECTRIC_LOCOMOTIVE",
            "railway": "FS",
            "epoch": "VI",
            "depot": "",
            "dcc_interface": "MTC_21",
            "control": "DCC_READY",
            "livery": "",
            "length_over_buffer": {"inches": None, "millimeters": 210.0},
            "technical_specifications": {
                "minimum_radius": 360.0,
                "coupling": {
                    "socket": "NEM_362",
                    "close_couplers": "NO",
                    "digital_shunting": "NO",
                },
                "flywheel_fitted": "NO",
                "metal_body": "NO",
                "interior_lights": "NO",
                "lights": "YES",
                "spring_buffers": "NO",
            },
            "is_dummy": False,
        }
    ],
    "count": 1,
}

RAILWAY: dict[str, Any] = {
    "name": "FS",
    "abbreviation": "FS",
    "registered_company_name": "Ferrovie dello Stato Italiane S.p.A.",
    "organization_entity_type": "STATE_OWNED_ENTERPRISE",
    "country": "IT",
    "description": {"it": None, "en": None},
    "period_of_activity": {
        "operating_since": "1905-07-01",
        "operating_until": None,
        "status": "ACTIVE",
    },
    "gauge": {"track_gauge": "STANDARD", "meters": 1.435},
    "total_length": {"kilometers": 24564.0, "miles": None},
    "contact_info": {
        "email": None,
        "website_url": "https://www.fsitaliane.it",
        "phone": None,
    },
    "social": {
        "facebook": None,
        "instagram": "fsitaliane",
        "linkedin": "ferrovie-dello-stato-s-p-a-",
        "twitter": "FSitaliane",
        "youtube": "fsitaliane",
    },
    "headquarters": ["Roma"],
}

SCALE: dict[str, Any] = {
    "name": "H0",
    "description": {"it": None, "en": None},
    "ratio": 87.0,
    "gauge": {"millimeters": 16.5, "inches": 0.65, "track_gauge": "STANDARD"},
    "standards": ["NEM"],
}


def write_json(path: Path, document: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document, indent=2), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv(SOURCE_ENVVAR, raising=False)
    monkeypatch.delenv(MAX_DEPTH_ENVVAR, raising=False)
    level = logger.level
    yield
    logger.setLevel(level or logging.INFO)


@pytest.fixture()
def dataset_dir(tmp_path: Path) -> Path:
    root = tmp_path / "dataset"
    write_json(root / "brands" / "acme.json", BRAND)
    write_json(root / "catalog_items" / "acme" / "60023.json", CATALOG_ITEM)
    write_json(root / "railways" / "fs.json", RAILWAY)
    write_json(root / "scales" / "h0.json", SCALE)
    return root
