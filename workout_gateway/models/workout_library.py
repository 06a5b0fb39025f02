"""Static workout catalog served by the recommendation routes."""
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple


DIFFICULTY_LABELS = frozenset({"Easy", "Medium", "Hard"})

Catalog = Mapping[str, Mapping[str, Tuple[Mapping[str, object], ...]]]


_WORKOUTS: Dict[str, Dict[str, List[dict]]] = {
    "strength": {
        "upper_body": [
            {
                "nama": "Push Up",
                "kesulitan": "Easy",
                "otot": ["dada", "trisep", "bahu"],
                "set": 3,
                "repetisi": "10-12",
                "instruksi": "Posisi plank, turunkan dada hingga hampir menyentuh lantai lalu dorong kembali ke atas.",
            },
            {
                "nama": "Dumbbell Shoulder Press",
                "kesulitan": "Medium",
                "otot": ["bahu", "trisep"],
                "set": 3,
                "repetisi": "8-10",
                "instruksi": "Duduk tegak, dorong dumbbell dari setinggi bahu hingga lengan lurus di atas kepala.",
            },
            {
                "nama": "Pull Up",
                "kesulitan": "Hard",
                "otot": ["punggung", "bisep"],
                "set": 4,
                "repetisi": "6-8",
                "instruksi": "Gantung pada palang, tarik badan hingga dagu melewati palang, turunkan perlahan.",
            },
            {
                "nama": "Bench Dip",
                "kesulitan": "Easy",
                "otot": ["trisep", "dada"],
                "set": 3,
                "repetisi": "10-12",
                "instruksi": "Tangan bertumpu pada bangku di belakang badan, tekuk siku hingga 90 derajat lalu dorong ke atas.",
            },
        ],
        "lower_body": [
            {
                "nama": "Bodyweight Squat",
                "kesulitan": "Easy",
                "otot": ["paha depan", "bokong"],
                "set": 3,
                "repetisi": "12-15",
                "instruksi": "Kaki selebar bahu, turunkan pinggul seperti duduk hingga paha sejajar lantai.",
            },
            {
                "nama": "Walking Lunge",
                "kesulitan": "Medium",
                "otot": ["paha depan", "bokong", "hamstring"],
                "set": 3,
                "repetisi": "10 per kaki",
                "instruksi": "Melangkah ke depan dan turunkan lutut belakang mendekati lantai, bergantian kaki.",
            },
            {
                "nama": "Barbell Deadlift",
                "kesulitan": "Hard",
                "otot": ["hamstring", "punggung bawah", "bokong"],
                "set": 4,
                "repetisi": "5",
                "instruksi": "Punggung netral, angkat barbel dari lantai dengan mendorong pinggul ke depan hingga berdiri tegak.",
            },
            {
                "nama": "Bulgarian Split Squat",
                "kesulitan": "Hard",
                "otot": ["paha depan", "bokong"],
                "set": 3,
                "repetisi": "8 per kaki",
                "instruksi": "Kaki belakang di atas bangku, turunkan badan hingga paha depan sejajar lantai.",
            },
        ],
        "core": [
            {
                "nama": "Plank",
                "kesulitan": "Easy",
                "otot": ["perut", "punggung bawah"],
                "set": 3,
                "repetisi": "30 detik",
                "instruksi": "Tumpu pada lengan bawah dan ujung kaki, jaga badan lurus dari kepala hingga tumit.",
            },
            {
                "nama": "Russian Twist",
                "kesulitan": "Medium",
                "otot": ["perut samping"],
                "set": 3,
                "repetisi": "20",
                "instruksi": "Duduk dengan kaki terangkat, putar badan ke kiri dan ke kanan secara bergantian.",
            },
            {
                "nama": "Hanging Leg Raise",
                "kesulitan": "Hard",
                "otot": ["perut bawah"],
                "set": 3,
                "repetisi": "10-12",
                "instruksi": "Gantung pada palang, angkat kaki lurus hingga sejajar pinggul lalu turunkan perlahan.",
            },
        ],
    },
    "endurance": {
        "cardio": [
            {
                "nama": "Jalan Cepat",
                "kesulitan": "Easy",
                "otot": ["kaki", "jantung"],
                "set": 1,
                "repetisi": "30 menit",
                "instruksi": "Berjalan dengan tempo cepat dan stabil, ayunkan lengan secara alami.",
            },
            {
                "nama": "Jogging",
                "kesulitan": "Medium",
                "otot": ["kaki", "jantung"],
                "set": 1,
                "repetisi": "25 menit",
                "instruksi": "Lari santai dengan napas teratur, pertahankan intensitas sedang.",
            },
            {
                "nama": "Lompat Tali",
                "kesulitan": "Medium",
                "otot": ["betis", "bahu", "jantung"],
                "set": 5,
                "repetisi": "1 menit",
                "instruksi": "Lompat ringan dengan ujung kaki, putar tali menggunakan pergelangan tangan.",
            },
            {
                "nama": "Interval Sprint",
                "kesulitan": "Hard",
                "otot": ["kaki", "jantung"],
                "set": 8,
                "repetisi": "30 detik sprint / 90 detik jalan",
                "instruksi": "Lari secepat mungkin selama 30 detik lalu pulihkan dengan berjalan.",
            },
        ],
        "hiit": [
            {
                "nama": "Jumping Jack",
                "kesulitan": "Easy",
                "otot": ["seluruh tubuh"],
                "set": 3,
                "repetisi": "45 detik",
                "instruksi": "Lompat sambil membuka kaki dan mengangkat tangan ke atas kepala, lalu kembali.",
            },
            {
                "nama": "Mountain Climber",
                "kesulitan": "Medium",
                "otot": ["perut", "bahu", "kaki"],
                "set": 4,
                "repetisi": "40 detik",
                "instruksi": "Dari posisi plank tinggi, tarik lutut ke dada secara bergantian dengan cepat.",
            },
            {
                "nama": "Burpee",
                "kesulitan": "Hard",
                "otot": ["seluruh tubuh"],
                "set": 4,
                "repetisi": "12",
                "instruksi": "Jongkok, lompat ke posisi plank, push up, kembali jongkok lalu lompat tinggi.",
            },
        ],
    },
}


def _freeze_record(record: dict) -> Mapping[str, object]:
    return MappingProxyType({
        key: tuple(value) if isinstance(value, list) else value
        for key, value in record.items()
    })


def _freeze(workouts: Dict[str, Dict[str, List[dict]]]) -> Catalog:
    """Wrap the raw catalog in read-only views so requests cannot mutate it."""

    return MappingProxyType({
        category: MappingProxyType({
            subcategory: tuple(_freeze_record(record) for record in records)
            for subcategory, records in subcategories.items()
        })
        for category, subcategories in workouts.items()
    })


WORKOUT_CATALOG: Catalog = _freeze(_WORKOUTS)
