"""
Default Data

Explicit seed step for a fresh record store: demo accounts, fundraisers and
events. Nothing is inserted when the store already has users.
"""

from alumni_hub.config import settings
from alumni_hub.services.database import DatabaseService
from alumni_hub.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_COLLEGE = settings.DEFAULT_COLLEGE

DEFAULT_USERS = [
    {
        "user_id": "admin1",
        "email": "admin@university.edu",
        "password": "admin123",
        "name": "Admin User",
        "role": "admin",
        "user_type": "management",
        "college": DEFAULT_COLLEGE,
        "department": "Administration",
    },
    {
        "user_id": "user1",
        "email": "john.doe@university.edu",
        "password": "password123",
        "name": "John Doe",
        "user_type": "alumni",
        "graduation_year": 2018,
        "major": "Computer Science",
        "branch": "Software Engineering",
        "company": "Tech Corp",
        "position": "Software Engineer",
        "college": DEFAULT_COLLEGE,
        "location": "San Francisco, CA",
        "skills": ["JavaScript", "React", "Node.js", "Python"],
        "experience": "5 years",
        "bio": "Passionate about web development and mentoring junior developers.",
    },
    {
        "user_id": "user2",
        "email": "jane.smith@university.edu",
        "password": "password123",
        "name": "Jane Smith",
        "user_type": "alumni",
        "graduation_year": 2019,
        "major": "Business Administration",
        "branch": "Finance",
        "company": "Finance Inc",
        "position": "Financial Analyst",
        "college": DEFAULT_COLLEGE,
        "location": "New York, NY",
        "skills": ["Financial Analysis", "Excel", "Bloomberg Terminal", "Risk Management"],
        "experience": "4 years",
        "bio": "Specialized in corporate finance and investment analysis.",
    },
    {
        "user_id": "user3",
        "email": "mike.johnson@university.edu",
        "password": "password123",
        "name": "Mike Johnson",
        "user_type": "alumni",
        "graduation_year": 2020,
        "major": "Mechanical Engineering",
        "branch": "Automotive Engineering",
        "company": "Tesla",
        "position": "Design Engineer",
        "college": DEFAULT_COLLEGE,
        "location": "Austin, TX",
        "skills": ["CAD Design", "SolidWorks", "MATLAB", "Product Development"],
        "experience": "3 years",
        "bio": "Working on sustainable transportation solutions.",
    },
    {
        "user_id": "user4",
        "email": "sarah.williams@university.edu",
        "password": "password123",
        "name": "Sarah Williams",
        "user_type": "alumni",
        "graduation_year": 2017,
        "major": "Marketing",
        "branch": "Digital Marketing",
        "company": "Google",
        "position": "Product Marketing Manager",
        "college": DEFAULT_COLLEGE,
        "location": "Mountain View, CA",
        "skills": ["Digital Marketing", "Analytics", "Brand Strategy", "Content Marketing"],
        "experience": "6 years",
        "bio": "Leading product marketing for cloud solutions.",
    },
    {
        "user_id": "user5",
        "email": "david.brown@university.edu",
        "password": "password123",
        "name": "David Brown",
        "user_type": "alumni",
        "graduation_year": 2018,
        "major": "Computer Science",
        "branch": "Artificial Intelligence",
        "company": "Microsoft",
        "position": "Senior Software Engineer",
        "college": DEFAULT_COLLEGE,
        "location": "Seattle, WA",
        "skills": ["Machine Learning", "Python", "TensorFlow", "Cloud Computing"],
        "experience": "5 years",
        "bio": "Building scalable cloud applications and AI solutions.",
    },
    {
        "user_id": "user6",
        "email": "emily.davis@university.edu",
        "password": "password123",
        "name": "Emily Davis",
        "user_type": "alumni",
        "graduation_year": 2019,
        "major": "Psychology",
        "branch": "Clinical Psychology",
        "company": "Healthcare Plus",
        "position": "Clinical Psychologist",
        "college": DEFAULT_COLLEGE,
        "location": "Boston, MA",
        "skills": ["Therapy", "Assessment", "Research", "Patient Care"],
        "experience": "4 years",
        "bio": "Helping patients with mental health and wellness.",
    },
    {
        "user_id": "teacher1",
        "email": "prof.anderson@university.edu",
        "password": "password123",
        "name": "Prof. Robert Anderson",
        "user_type": "teacher",
        "department": "Computer Science",
        "college": DEFAULT_COLLEGE,
        "position": "Professor",
        "major": "Computer Science",
        "experience": "15 years",
        "skills": ["Teaching", "Research", "Data Structures", "Algorithms"],
        "bio": "Teaching computer science fundamentals and conducting research in algorithms.",
    },
    {
        "user_id": "student1",
        "email": "alex.chen@university.edu",
        "password": "password123",
        "name": "Alex Chen",
        "user_type": "student",
        "enrollment_year": 2022,
        "major": "Computer Science",
        "branch": "Machine Learning",
        "college": DEFAULT_COLLEGE,
        "skills": ["Python", "Java", "Machine Learning", "Data Analysis"],
        "bio": "Third-year student passionate about AI and machine learning.",
    },
    {
        "user_id": "student2",
        "email": "lisa.martinez@university.edu",
        "password": "password123",
        "name": "Lisa Martinez",
        "user_type": "student",
        "enrollment_year": 2023,
        "major": "Business Administration",
        "branch": "Marketing",
        "college": DEFAULT_COLLEGE,
        "skills": ["Marketing", "Social Media", "Analytics", "Communication"],
        "bio": "Second-year business student interested in digital marketing.",
    },
]

DEFAULT_FUNDRAISERS = [
    {
        "fundraiser_id": "1",
        "title": "New Engineering Lab Construction",
        "description": (
            "Help us build a state-of-the-art engineering laboratory to provide "
            "students with hands-on learning experiences."
        ),
        "goal": 500000,
        "raised": 342500,
        "donors": 156,
        "category": "Facilities",
        "end_date": "2025-03-15",
        "featured": True,
        "image": "bg-gradient-to-r from-blue-500 to-cyan-600",
        "created_by": "admin1",
    },
    {
        "fundraiser_id": "2",
        "title": "Alumni Scholarship Fund",
        "description": "Support deserving students with financial assistance to pursue their education dreams.",
        "goal": 250000,
        "raised": 185000,
        "donors": 89,
        "category": "Scholarships",
        "end_date": "2025-06-30",
        "image": "bg-gradient-to-r from-green-500 to-emerald-600",
        "created_by": "admin1",
    },
]

DEFAULT_EVENTS = [
    {
        "event_id": "1",
        "title": "Alumni Mixer 2024",
        "description": "Join us for an evening of networking and reconnecting with fellow alumni.",
        "date": "2024-12-15",
        "location": "Downtown Campus",
        "rsvp": 45,
        "max_attendees": 100,
        "created_by": "admin1",
        "category": "Networking",
    },
    {
        "event_id": "2",
        "title": "Career Workshop",
        "description": "Professional development workshop for recent graduates.",
        "date": "2024-12-22",
        "location": "Virtual",
        "rsvp": 78,
        "created_by": "admin1",
        "category": "Professional Development",
    },
]


def seed_default_data(db: DatabaseService) -> bool:
    """
    Insert the default records into an empty store.

    Returns:
        bool: True when data was inserted, False when the store already had users
    """
    if db.count_users() > 0:
        logger.info("Record store already populated, skipping seed")
        return False

    for user in DEFAULT_USERS:
        db.create_user(**user)
    for fundraiser in DEFAULT_FUNDRAISERS:
        db.create_fundraiser(**fundraiser)
    for event in DEFAULT_EVENTS:
        db.create_event(**event)

    logger.info(
        "Seeded default data",
        users=len(DEFAULT_USERS),
        fundraisers=len(DEFAULT_FUNDRAISERS),
        events=len(DEFAULT_EVENTS),
    )
    return True
