"""
HoldSpace - Marketplace Catalog

Modalities, languages and session durations offered on the marketplace.
"""
from types import MappingProxyType

MODALITIES = (
    MappingProxyType({"id": "breathwork", "label": "Breathwork", "description": "Guided breathing for calm and release"}),
    MappingProxyType({"id": "energy-healing", "label": "Energy Healing", "description": "Reiki, pranic, and subtle body work"}),
    MappingProxyType({"id": "somatic", "label": "Somatic Work", "description": "Body-based trauma release"}),
    MappingProxyType({"id": "grief-holding", "label": "Grief Holding", "description": "Compassionate space for loss"}),
    MappingProxyType({"id": "sound-healing", "label": "Sound Healing", "description": "Singing bowls, tones, and vibration"}),
    MappingProxyType({"id": "meditation", "label": "Meditation", "description": "Guided presence and stillness"}),
    MappingProxyType({"id": "nervous-system", "label": "Nervous System", "description": "Vagal toning and co-regulation"}),
    MappingProxyType({"id": "emotional-release", "label": "Emotional Release", "description": "Safe space for big feelings"}),
)

MODALITY_IDS = frozenset(m["id"] for m in MODALITIES)

LANGUAGES = (
    "English",
    "Spanish",
    "German",
    "French",
    "Portuguese",
    "Hindi",
    "Japanese",
    "Korean",
    "Arabic",
    "Mandarin",
)

DURATION_OPTIONS = (
    MappingProxyType({"minutes": 30, "label": "30 minutes"}),
    MappingProxyType({"minutes": 60, "label": "1 hour"}),
    MappingProxyType({"minutes": 90, "label": "90 minutes"}),
)


def is_known_modality(modality_id: str) -> bool:
    return modality_id in MODALITY_IDS
