"""리포트 테스트 자산 (엔진 독립)

- 단순 dict만 보관
- pytest fixture 선언하지 않음
- event_day는 기준일(2026-01-01)로부터의 일수
"""

HEADPHONES_SCENARIO = {
    "query": {
        "id": "lost-1",
        "kind": "lost",
        "category": "electronics",
        "description": "black Sony headphones",
        "location": {"latitude": 12.97, "longitude": 77.59},
        "event_day": 10,
    },
    "candidate_a": {
        "id": "found-a",
        "kind": "found",
        "category": "electronics",
        "description": "black Sony headphone",
        "location": {"latitude": 12.98, "longitude": 77.60},
        "event_day": 11,
    },
    "candidate_b": {
        "id": "found-b",
        "kind": "found",
        "category": "stationery",
        "description": "blue pen",
        "location": {"latitude": 40.0, "longitude": -70.0},
        "event_day": 90,
    },
}

CAMPUS_REPORTS = [
    {
        "id": "found-wallet",
        "kind": "found",
        "category": "wallet",
        "item_name": "Brown leather wallet",
        "description": "brown leather billfold with a few cards near the canteen",
        "location": {"place_name": "Main Canteen", "area": "North Campus"},
        "event_day": 3,
        "community": "rvr",
        "owner_id": "user-2",
    },
    {
        "id": "found-phone",
        "kind": "found",
        "category": "electronics",
        "item_name": "Samsung Galaxy phone",
        "description": "samsung galaxy s21 smartphone in a blue case",
        "location": {"place_name": "Central Library", "area": "North Campus"},
        "event_day": 4,
        "community": "rvr",
        "owner_id": "user-3",
    },
    {
        "id": "found-bottle",
        "kind": "found",
        "category": "other",
        "item_name": "Steel bottle",
        "description": "silver milton steel flask",
        "location": {"place_name": "Gym", "area": "South Campus"},
        "event_day": 20,
        "community": "rvr",
        "owner_id": "user-4",
    },
]
