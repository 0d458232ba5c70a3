"""Shared test configuration and profile fixtures."""

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "properties: cross-candidate invariants of the ranked output"
    )


@pytest.fixture
def mentee_record():
    """A fully specified mentee, as the profile service would send it."""
    return {
        "id": "mentee-1",
        "personalInfo": {"location": "Austin, USA", "timezone": "EST", "bio": ""},
        "professionalInfo": {
            "currentRole": "Junior developer",
            "experienceLevel": "intermediate",
            "skills": ["React", "Node", "TypeScript"],
            "goals": ["System Design", "Career Growth"],
            "interests": ["web"],
        },
        "learningPreferences": {
            "pace": "moderate",
            "format": "visual",
            "timeOfDay": "morning",
            "duration": "medium",
        },
        "mentoringNeeds": {
            "areasOfFocus": ["architecture"],
            "sessionTypes": ["video"],
            "frequency": "weekly",
            "budget": {"min": 0, "max": 100, "currency": "USD"},
            "timeCommitment": 3,
        },
        "communicationStyle": {
            "preferredMethods": ["video", "chat"],
            "responseTime": "within-hours",
            "communicationFrequency": "medium",
        },
        "personalityTraits": ["analytical", "patient"],
    }


@pytest.fixture
def mentor_record():
    """A verified mentor who fits ``mentee_record`` closely."""
    return {
        "id": "mentor-a",
        "personalInfo": {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "location": "Boston, USA",
            "timezone": "EST",
            "bio": "Patient and analytical engineering lead.",
        },
        "professionalInfo": {
            "currentRole": "Staff Engineer",
            "company": "Acme",
            "yearsOfExperience": 12,
            "skills": ["React", "Node.js", "GraphQL"],
            "specializations": ["TypeScript"],
        },
        "mentoringInfo": {
            "areasOfExpertise": ["System Design", "Leadership", "Frontend"],
            "experienceLevel": "advanced",
            "availability": {
                "timeSlots": [{"day": "Monday", "startTime": "09:00", "endTime": "11:00"}],
                "maxSessionsPerWeek": 4,
                "sessionDuration": 60,
            },
            "pricing": {"hourlyRate": 80, "currency": "USD", "freeSessions": 1},
            "languages": ["English"],
            "communicationPreferences": ["video", "chat", "email"],
        },
        "verificationStatus": "verified",
        "stats": {
            "totalSessions": 120,
            "averageRating": 4.8,
            "totalReviews": 40,
            "completionRate": 0.95,
            "responseTimeHours": 2,
        },
        "preferences": {"sessionTypes": ["video", "chat"], "maxMentees": 2},
    }
