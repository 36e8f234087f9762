from typing import List, Optional

from pydantic import BaseModel


class Location(BaseModel):
    lat: float
    lng: float


class SafeSpace(BaseModel):
    id: int
    name: str
    type: str
    location: Location
    hours: str
    phone: Optional[str] = None
    accessibility: List[str]
    description: str
    services: List[str]
    emergency: bool = False
    distance: str
    building: str


SAFE_SPACES = [
    SafeSpace(
        id=1,
        name="Campus Counseling Center",
        type="professional",
        location=Location(lat=40.7589, lng=-73.9851),
        hours="9AM-5PM Mon-Fri",
        phone="+1-555-0123",
        accessibility=["wheelchair", "quiet_room", "asl_interpreter"],
        description="Professional mental health services and counseling. "
        "Licensed therapists provide individual and group sessions.",
        services=["Individual Therapy", "Group Counseling", "Crisis Intervention"],
        distance="0.2 miles",
        building="Student Services Building, Room 201",
    ),
    SafeSpace(
        id=2,
        name="Student Wellness Garden",
        type="outdoor",
        location=Location(lat=40.7590, lng=-73.9845),
        hours="24/7",
        accessibility=["wheelchair", "braille_signs", "sensory_friendly"],
        description="Peaceful outdoor space for relaxation and meditation. "
        "Features walking paths, benches, and quiet zones.",
        services=["Meditation Areas", "Walking Paths", "Quiet Zones"],
        distance="0.1 miles",
        building="Behind Library",
    ),
    SafeSpace(
        id=3,
        name="Peer Support Lounge",
        type="peer_support",
        location=Location(lat=40.7580, lng=-73.9860),
        hours="10AM-8PM Daily",
        phone="+1-555-0124",
        accessibility=["wheelchair", "large_text", "assistive_listening"],
        description="Casual space for student peer support and socializing. "
        "Trained peer supporters available.",
        services=["Peer Support", "Social Events", "Study Groups"],
        distance="0.3 miles",
        building="Student Union, Room 105",
    ),
    SafeSpace(
        id=4,
        name="24/7 Crisis Center",
        type="emergency",
        location=Location(lat=40.7575, lng=-73.9855),
        hours="24/7",
        phone="+1-555-0199",
        accessibility=["wheelchair", "asl_interpreter", "quiet_room"],
        description="Immediate mental health support for urgent situations. "
        "No appointment needed.",
        services=["Crisis Counseling", "Emergency Support", "Safety Planning"],
        emergency=True,
        distance="0.4 miles",
        building="Health Center Annex",
    ),
    SafeSpace(
        id=5,
        name="Mindfulness Meditation Room",
        type="quiet",
        location=Location(lat=40.7585, lng=-73.9840),
        hours="6AM-10PM Daily",
        accessibility=["sensory_friendly", "quiet_room", "wheelchair"],
        description="Dedicated silent space for meditation and mindfulness "
        "practice. Cushions and guides provided.",
        services=["Meditation", "Mindfulness", "Yoga"],
        distance="0.2 miles",
        building="Wellness Center, Room 305",
    ),
    SafeSpace(
        id=6,
        name="Student Health Center",
        type="professional",
        location=Location(lat=40.7570, lng=-73.9865),
        hours="8AM-6PM Mon-Sat",
        phone="+1-555-0125",
        accessibility=["wheelchair", "assistive_listening", "large_text"],
        description="Comprehensive health services including mental health "
        "assessments and referrals.",
        services=["Health Assessments", "Medication Management", "Referrals"],
        distance="0.3 miles",
        building="Health Sciences Building",
    ),
]


def list_safe_spaces(
    space_type: Optional[str] = None,
    accessibility: Optional[str] = None,
) -> List[SafeSpace]:
    spaces = SAFE_SPACES
    if space_type and space_type != "all":
        spaces = [s for s in spaces if s.type == space_type]
    if accessibility:
        spaces = [s for s in spaces if accessibility in s.accessibility]
    return spaces


def get_safe_space(space_id: int) -> Optional[SafeSpace]:
    return next((s for s in SAFE_SPACES if s.id == space_id), None)
