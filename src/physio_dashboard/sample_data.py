"""Static assessment dataset shown by the dashboard."""

USER_STATS = {
    "assessment": {"number": 1, "date": "16/10/2024"},
    "age": {"years": 17, "birthDate": "29/06/1994"},
    "weight": {"value": 58.8, "change": 0},
    "height": {"value": 1.63, "change": 0},
}

RESULTS = {
    "leanMass": {"value": 15, "change": 18},
    "fatMass": {"value": 15, "change": 18},
    "bodyFat": {"value": 15, "change": 18},
    "bmi": {"value": 15, "change": 18},
}

HISTORY = [
    {"month": "Jan", "value": 30},
    {"month": "Feb", "value": 45},
    {"month": "Mar", "value": 60},
    {"month": "Apr", "value": 85},
    {"month": "May", "value": 100},
    {"month": "Jun", "value": 120},
    {"month": "Jul", "value": 140},
    {"month": "Aug", "value": 155},
    {"month": "Sep", "value": 180},
    {"month": "Oct", "value": 210},
    {"month": "Nov", "value": 235},
    {"month": "Dec", "value": 240},
]
