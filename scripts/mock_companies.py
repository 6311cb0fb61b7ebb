# scripts/mock_companies.py
# Writes data/mock_companies.json, a larger random dataset for trying out pagination.

import json
from pathlib import Path

import numpy as np

from company_browser.core.records import CompanyRecord

CATEGORIES = ["Farm Management", "Vertical Farming", "Robotics", "Biologicals", "Marketplace"]
STAGES = ["Seed", "Series A", "Series B", "Series C", "Series D", "Public", "Acquired"]
COUNTRIES = ["USA", "India", "Israel", "Germany", "Brazil", "UK", "Canada"]
TECH = ["Precision Agriculture", "Computer Vision", "IoT", "Soil Sensors", "Robotics", "Indoor Farming"]


def main(n_companies: int = 250) -> None:
    root = Path(__file__).resolve().parent.parent
    data_dir = root / "data"
    data_dir.mkdir(exist_ok=True)

    rng = np.random.default_rng(42)

    companies = []
    for i in range(n_companies):
        founded = int(rng.integers(2005, 2023))
        record = CompanyRecord(
            name=f"Company {i:03d}",
            category=str(rng.choice(CATEGORIES)),
            stage=str(rng.choice(STAGES)),
            country=str(rng.choice(COUNTRIES)),
            # roughly one in ten companies has no disclosed funding
            funding=None if rng.random() < 0.1 else round(float(rng.lognormal(3.5, 1.2)), 1),
            founded=founded,
            employees=int(rng.integers(5, 2000)),
            tech=tuple(rng.choice(TECH, size=2, replace=False).tolist()),
            last_round_year=int(rng.integers(founded, 2025)),
        )
        companies.append(record.to_dict())

    stages, counts = np.unique([c["stage"] for c in companies], return_counts=True)
    doc = {
        "overview": {"totalCompanies": n_companies},
        "companies": companies,
        "funding": {
            "byStage": [
                {
                    "stage": stage,
                    "amount": round(sum(c["funding"] or 0 for c in companies if c["stage"] == stage), 1),
                }
                for stage in stages
            ],
        },
        "technologies": {
            "categories": [
                {"name": cat, "value": sum(1 for c in companies if c["category"] == cat)}
                for cat in CATEGORIES
            ],
        },
    }

    out = data_dir / "mock_companies.json"
    out.write_text(json.dumps(doc, indent=2))
    print(f"wrote {out} ({n_companies} companies, {len(stages)} stages, {int(counts.max())} max per stage)")


if __name__ == "__main__":
    main()
