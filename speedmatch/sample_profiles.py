# Mock attendee list used when no data file is configured.
from typing import Any, Dict, List

SAMPLE_PARTICIPANTS: List[Dict[str, Any]] = [
    {
        "id": "p001",
        "name": "Sabina Chen",
        "role": "Project Manager",
        "company": "Hired",
        "bio": "Navigating the intersection of economic trends and AR data visualization.",
        "interests": ["Economic Indicators", "Data Storytelling", "AR Dashboards"],
        "skills": ["Project Management", "Agile", "Data Analysis", "Team Leadership"],
        "linkedin_url": "https://linkedin.com/in/sabinachen",
        "location": "San Francisco, CA",
        "experience_years": 8,
    },
    {
        "id": "p002",
        "name": "Vong Patel",
        "role": "Data Strategist",
        "company": "Minstar",
        "bio": "Looking for partners to build the next gen of coherent healthcare deliverables in VR.",
        "interests": ["Healthcare Data", "Virtual Collaboration", "Clean Sets"],
        "skills": ["Data Strategy", "Healthcare IT", "VR Development", "Python"],
        "linkedin_url": "https://linkedin.com/in/vongpatel",
        "location": "Austin, TX",
        "experience_years": 6,
    },
    {
        "id": "p003",
        "name": "Marlaina Rodriguez",
        "role": "XR Developer",
        "company": "Chamber of Commerce",
        "bio": "Focusing on member marketing through immersive city experiences.",
        "interests": ["Spatial Audio", "Digital Twins", "Civic Tech"],
        "skills": ["WebXR", "Three.js", "React", "TypeScript", "Unity"],
        "linkedin_url": "https://linkedin.com/in/marlainarodriguez",
        "location": "Denver, CO",
        "experience_years": 5,
    },
    {
        "id": "p004",
        "name": "Alex Kim",
        "role": "AI Engineer",
        "company": "TechVentures",
        "bio": "Building intelligent systems that understand human behavior in virtual spaces.",
        "interests": ["Machine Learning", "Computer Vision", "XR Analytics"],
        "skills": ["Python", "TensorFlow", "Computer Vision", "NLP"],
        "linkedin_url": "https://linkedin.com/in/alexkim",
        "location": "Seattle, WA",
        "experience_years": 4,
    },
    {
        "id": "p005",
        "name": "Jordan Taylor",
        "role": "UX Designer",
        "company": "DesignLab",
        "bio": "Crafting intuitive spatial interfaces that feel natural and accessible.",
        "interests": ["Spatial UI", "Accessibility", "User Research"],
        "skills": ["Figma", "Prototyping", "User Research", "Spatial Design"],
        "linkedin_url": "https://linkedin.com/in/jordantaylor",
        "location": "Portland, OR",
        "experience_years": 7,
    },
    {
        "id": "p006",
        "name": "Deepak Sharma",
        "role": "Full Stack Developer",
        "company": "StartupXYZ",
        "bio": "Passionate about building scalable web applications with immersive features.",
        "interests": ["WebXR", "React", "Node.js", "Cloud Architecture"],
        "skills": ["JavaScript", "React", "Node.js", "AWS", "WebXR"],
        "linkedin_url": "https://linkedin.com/in/deepaksharma",
        "location": "New York, NY",
        "experience_years": 6,
    },
    {
        "id": "p007",
        "name": "Serena Williams",
        "role": "AI Researcher",
        "company": "AI Labs",
        "bio": "Researching AI-powered matching algorithms for social connections.",
        "interests": ["Recommendation Systems", "Social Networks", "NLP"],
        "skills": ["Machine Learning", "Python", "Research", "Data Science"],
        "linkedin_url": "https://linkedin.com/in/serenawilliams",
        "location": "Boston, MA",
        "experience_years": 5,
    },
    {
        "id": "p008",
        "name": "Marcus Johnson",
        "role": "3D Artist",
        "company": "Creative Studios",
        "bio": "Creating stunning 3D environments and characters for immersive experiences.",
        "interests": ["3D Modeling", "Animation", "Virtual Production"],
        "skills": ["Blender", "Maya", "Substance Painter", "Unity"],
        "linkedin_url": "https://linkedin.com/in/marcusjohnson",
        "location": "Los Angeles, CA",
        "experience_years": 8,
    },
]
