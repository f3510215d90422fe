# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-20
# Description: sample_documents.py
# -----------------------------------------------------------------------------
from typing import Any, Dict, List

# Small demo corpus loaded by POST /documents/sample
SAMPLE_DOCUMENTS: List[Dict[str, Any]] = [
    {
        "doc_id": "csec-lab-1",
        "text": "csec-lab is good environment",
        "metadata": {"title": "CSEC Lab Environment", "category": "academic"},
    },
    {
        "doc_id": "csec-lab-2",
        "text": "csec-lab contains around 400 students",
        "metadata": {"title": "CSEC Lab Student Count", "category": "academic"},
    },
    {
        "doc_id": "csec-astu-1",
        "text": "csec-astu has 4 division",
        "metadata": {"title": "CSEC ASTU Divisions", "category": "academic"},
    },
    {
        "doc_id": "csec-dev-1",
        "text": "csec-dev has around 50 members",
        "metadata": {"title": "CSEC Dev Members", "category": "academic"},
    },
    {
        "doc_id": "general-1",
        "text": "sky is blue",
        "metadata": {"title": "General Fact", "category": "general"},
    },
    {
        "doc_id": "personal-1",
        "text": "abebe eats beso",
        "metadata": {"title": "Personal Habit", "category": "personal"},
    },
    {
        "doc_id": "location-1",
        "text": "astu is found in adama",
        "metadata": {"title": "ASTU Location", "category": "location"},
    },
    {
        "doc_id": "location-2",
        "text": "adama is a beautiful city",
        "metadata": {"title": "Adama City", "category": "location"},
    },
    {
        "doc_id": "location-3",
        "text": "addis abeba is different from adama",
        "metadata": {"title": "City Comparison", "category": "location"},
    },
    {
        "doc_id": "csec-lab-3",
        "text": "csec-lab has been created since 2023",
        "metadata": {"title": "CSEC Lab Creation", "category": "academic"},
    },
]
