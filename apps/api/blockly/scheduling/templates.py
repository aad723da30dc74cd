SCHEDULE_TEMPLATES = [
    {
        "id": "traditional-7",
        "label": "Traditional 7-Period",
        "description": "Seven shorter daily periods plus lunch.",
        "schedule_types": [
            {
                "name": "Traditional Day", "lunch_enabled": True, "lunch_start": "11:35", "lunch_end": "12:05",
                "blocks": [
                    {"name": "Period 1", "start_time": "08:00", "end_time": "08:50"},
                    {"name": "Period 2", "start_time": "08:55", "end_time": "09:45"},
                    {"name": "Period 3", "start_time": "09:50", "end_time": "10:40"},
                    {"name": "Period 4", "start_time": "10:45", "end_time": "11:35"},
                    {"name": "Lunch", "start_time": "11:35", "end_time": "12:05", "is_lunch": True},
                    {"name": "Period 5", "start_time": "12:10", "end_time": "13:00"},
                    {"name": "Period 6", "start_time": "13:05", "end_time": "13:55"},
                    {"name": "Period 7", "start_time": "14:00", "end_time": "14:50"},
                ],
            },
        ],
    },
    {
        "id": "ab-block",
        "label": "A/B Block",
        "description": "Alternating day schedule for schools that run every other day.",
        "schedule_types": [
            {
                "name": "Day A", "lunch_enabled": True, "lunch_start": "11:10", "lunch_end": "11:50",
                "blocks": [
                    {"name": "A1", "start_time": "08:00", "end_time": "09:30"},
                    {"name": "A2", "start_time": "09:40", "end_time": "11:10"},
                    {"name": "Lunch", "start_time": "11:10", "end_time": "11:50", "is_lunch": True},
                    {"name": "A3", "start_time": "11:55", "end_time": "13:25"},
                    {"name": "A4", "start_time": "13:35", "end_time": "15:05"},
                ],
            },
            {
                "name": "Day B", "lunch_enabled": True, "lunch_start": "11:10", "lunch_end": "11:50",
                "blocks": [
                    {"name": "B1", "start_time": "08:00", "end_time": "09:30"},
                    {"name": "B2", "start_time": "09:40", "end_time": "11:10"},
                    {"name": "Lunch", "start_time": "11:10", "end_time": "11:50", "is_lunch": True},
                    {"name": "B3", "start_time": "11:55", "end_time": "13:25"},
                    {"name": "B4", "start_time": "13:35", "end_time": "15:05"},
                ],
            },
        ],
    },
    {
        "id": "four-by-four",
        "label": "4x4 Block",
        "description": "Four long blocks per day with lunch.",
        "schedule_types": [
            {
                "name": "4x4 Day", "lunch_enabled": True, "lunch_start": "11:10", "lunch_end": "11:50",
                "blocks": [
                    {"name": "Block 1", "start_time": "08:00", "end_time": "09:30"},
                    {"name": "Block 2", "start_time": "09:40", "end_time": "11:10"},
                    {"name": "Lunch", "start_time": "11:10", "end_time": "11:50", "is_lunch": True},
                    {"name": "Block 3", "start_time": "11:55", "end_time": "13:25"},
                    {"name": "Block 4", "start_time": "13:35", "end_time": "15:05"},
                ],
            },
        ],
    },
    {
        "id": "rotating-abc",
        "label": "Rotating A/B/C",
        "description": "Three-day rotation with a daily flex block.",
        "schedule_types": [
            {
                "name": f"Day {letter}", "lunch_enabled": True, "lunch_start": "11:15", "lunch_end": "11:50",
                "blocks": [
                    {"name": f"{letter} Block 1", "start_time": "08:00", "end_time": "09:10"},
                    {"name": f"{letter} Block 2", "start_time": "09:20", "end_time": "10:30"},
                    {"name": "Flex / Advisory", "start_time": "10:40", "end_time": "11:15"},
                    {"name": "Lunch", "start_time": "11:15", "end_time": "11:50", "is_lunch": True},
                    {"name": f"{letter} Block 3", "start_time": "11:55", "end_time": "13:05"},
                    {"name": f"{letter} Block 4", "start_time": "13:15", "end_time": "14:25"},
                ],
            }
            for letter in ("A", "B", "C")
        ],
    },
    {
        "id": "custom-starter",
        "label": "Custom Starter",
        "description": "One blank schedule type you can fully edit.",
        "schedule_types": [
            {"name": "Custom Day", "lunch_enabled": True, "lunch_start": "12:00", "lunch_end": "12:30", "blocks": []},
        ],
    },
]


# Sample catalog loaded by POST /schedule-types/demo. Not listed with the
# templates; the seed also adds tasks and an override.
DEMO_TEMPLATE = {
    "id": "demo",
    "label": "Demo Data",
    "description": "Two A/B demo days with tasks and an override for tomorrow.",
    "schedule_types": [
        {
            "name": f"Demo Day {letter}", "lunch_enabled": True, "lunch_start": "11:10", "lunch_end": "11:50",
            "blocks": [
                {"name": f"{letter}1 {first}", "start_time": "08:00", "end_time": "09:25"},
                {"name": f"{letter}2 {second}", "start_time": "09:35", "end_time": "11:00"},
                {"name": "Lunch", "start_time": "11:10", "end_time": "11:50", "is_lunch": True},
                {"name": f"{letter}3 {third}", "start_time": "11:55", "end_time": "13:20"},
            ],
        }
        for letter, first, second, third in (
            ("A", "Math", "Science", "English"),
            ("B", "History", "Art", "PE"),
        )
    ],
}

# (title, due today?, name of the Day A block it belongs to)
DEMO_TASKS = [
    ("Finish Algebra worksheet", True, "A1 Math"),
    ("Read chapter 4 notes", False, None),
]


def get_template(template_id: str):
    return next((t for t in SCHEDULE_TEMPLATES if t["id"] == template_id), None)
