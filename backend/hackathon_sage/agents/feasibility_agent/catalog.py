"""Fixed technology and feature catalog.

Entries are plain dicts; the rules build fresh ``Technology`` and
``Feature`` models from them on every call, so nothing here is ever
mutated. Feature ``estimated_hours`` are base hours before the
complexity multiplier.
"""

from __future__ import annotations

from typing import Any, Dict, List

# ── Technologies ──────────────────────────────────────────────────────

CATEGORY_TECHNOLOGIES: Dict[str, List[Dict[str, Any]]] = {
    "web": [
        {"name": "React", "category": "Frontend", "difficulty": 2, "setup_time_hours": 1, "description": "Popular UI library for building interactive web interfaces."},
        {"name": "Node.js", "category": "Backend", "difficulty": 2, "setup_time_hours": 1, "description": "JavaScript runtime for building scalable backend services."},
        {"name": "Express", "category": "Backend", "difficulty": 2, "setup_time_hours": 0.5, "description": "Fast, minimalist web framework for Node.js"},
        {"name": "MongoDB", "category": "Database", "difficulty": 2, "setup_time_hours": 1, "description": "NoSQL database for flexible data storage."},
    ],
    "mobile": [
        {"name": "React Native", "category": "Mobile Framework", "difficulty": 3, "setup_time_hours": 2, "description": "Build native mobile apps using React."},
        {"name": "Firebase", "category": "Backend", "difficulty": 2, "setup_time_hours": 1, "description": "Backend-as-a-service platform with real-time database."},
    ],
    "ai-ml": [
        {"name": "TensorFlow.js", "category": "AI/ML", "difficulty": 4, "setup_time_hours": 1, "description": "Library for machine learning in JavaScript."},
        {"name": "Hugging Face", "category": "AI/ML", "difficulty": 3, "setup_time_hours": 1, "description": "Open-source provider of NLP models."},
    ],
    "game": [
        {"name": "Phaser", "category": "Game Engine", "difficulty": 3, "setup_time_hours": 1, "description": "Fast 2D game framework for making HTML5 games."},
        {"name": "Three.js", "category": "3D Graphics", "difficulty": 4, "setup_time_hours": 2, "description": "JavaScript 3D library using WebGL."},
    ],
    "hardware": [
        {"name": "Arduino", "category": "Hardware", "difficulty": 3, "setup_time_hours": 2, "description": "Open-source electronics platform for quick prototyping."},
        {"name": "Raspberry Pi", "category": "Hardware", "difficulty": 3, "setup_time_hours": 2, "description": "Small computer for IoT projects."},
        {"name": "Johnny-Five", "category": "Hardware/JS", "difficulty": 3, "setup_time_hours": 1, "description": "JavaScript framework for robotics and IoT."},
    ],
    "blockchain": [
        {"name": "Web3.js", "category": "Blockchain", "difficulty": 4, "setup_time_hours": 2, "description": "JavaScript library for interacting with Ethereum."},
        {"name": "Solidity", "category": "Smart Contracts", "difficulty": 4, "setup_time_hours": 3, "description": "Programming language for Ethereum smart contracts."},
    ],
    "data": [
        {"name": "D3.js", "category": "Data Visualization", "difficulty": 4, "setup_time_hours": 2, "description": "Library for data-driven document manipulation."},
        {"name": "Chart.js", "category": "Data Visualization", "difficulty": 2, "setup_time_hours": 0.5, "description": "Simple yet flexible JavaScript charting."},
    ],
    "ar-vr": [
        {"name": "A-Frame", "category": "VR", "difficulty": 3, "setup_time_hours": 1, "description": "Web framework for building VR experiences."},
        {"name": "AR.js", "category": "AR", "difficulty": 3, "setup_time_hours": 1.5, "description": "Augmented Reality for the web."},
    ],
}

# Every project gets these
COMMON_TECHNOLOGIES: List[Dict[str, Any]] = [
    {"name": "Git", "category": "Version Control", "difficulty": 1, "setup_time_hours": 0.5, "description": "Track and manage code changes."},
    {"name": "GitHub", "category": "Collaboration", "difficulty": 1, "setup_time_hours": 0.5, "description": "Host and manage Git repositories."},
]

WEB_STYLING_TECHNOLOGY: Dict[str, Any] = {
    "name": "TailwindCSS", "category": "Frontend", "difficulty": 2, "setup_time_hours": 0.5,
    "description": "Utility-first CSS framework for rapid UI development.",
}

MOBILE_TOOLING_TECHNOLOGY: Dict[str, Any] = {
    "name": "Expo", "category": "Mobile Development", "difficulty": 2, "setup_time_hours": 1,
    "description": "Platform for universal React applications.",
}

TYPED_LANGUAGE_TECHNOLOGY: Dict[str, Any] = {
    "name": "TypeScript", "category": "Language", "difficulty": 3, "setup_time_hours": 1,
    "description": "JavaScript with static typing for better code quality.",
}

# ── Features ──────────────────────────────────────────────────────────

BASELINE_FEATURES: List[Dict[str, Any]] = [
    {"name": "User Authentication", "priority": "must-have", "description": "Allow users to create accounts and sign in.", "estimated_hours": 4},
    {"name": "Database Setup", "priority": "must-have", "description": "Set up data models and storage for your application.", "estimated_hours": 3},
    {"name": "Core Functionality", "priority": "must-have", "description": "Implement the primary features unique to your application.", "estimated_hours": 8},
    {"name": "Frontend UI", "priority": "must-have", "description": "Design and implement the user interface.", "estimated_hours": 6},
]

# Keyed by category; both web and mobile get API work
CATEGORY_FEATURES: Dict[str, List[Dict[str, Any]]] = {
    "web": [
        {"name": "API Integration", "priority": "should-have", "description": "Connect to third-party services via APIs.", "estimated_hours": 4},
    ],
    "mobile": [
        {"name": "API Integration", "priority": "should-have", "description": "Connect to third-party services via APIs.", "estimated_hours": 4},
    ],
    "ai-ml": [
        {"name": "Model Training", "priority": "must-have", "description": "Train or fine-tune an AI model for your specific use case.", "estimated_hours": 6},
        {"name": "Data Processing Pipeline", "priority": "must-have", "description": "Process and prepare data for your model.", "estimated_hours": 5},
    ],
    "game": [
        {"name": "Game Mechanics", "priority": "must-have", "description": "Implement core gameplay mechanics and player controls.", "estimated_hours": 8},
        {"name": "Game Assets", "priority": "should-have", "description": "Create or source graphics, audio, and other assets.", "estimated_hours": 4},
    ],
}

DELIVERY_FEATURES: List[Dict[str, Any]] = [
    {"name": "Testing Suite", "priority": "nice-to-have", "description": "Set up automated tests for your application.", "estimated_hours": 3},
    {"name": "Deployment", "priority": "should-have", "description": "Set up CI/CD and deploy your application.", "estimated_hours": 2},
]

ADVANCED_FEATURES: List[Dict[str, Any]] = [
    {"name": "Analytics", "priority": "nice-to-have", "description": "Implement user analytics and tracking.", "estimated_hours": 3},
    {"name": "Performance Optimization", "priority": "nice-to-have", "description": "Optimize application for speed and efficiency.", "estimated_hours": 4},
]

# ── Timeline ──────────────────────────────────────────────────────────

TIMELINE_STAGE_TEXT: List[Dict[str, str]] = [
    {"name": "Setup & Planning", "description": "Set up development environment, plan architecture, and create initial project structure."},
    {"name": "Core Development", "description": "Implement core features and functionality, focusing on the MVP requirements."},
    {"name": "Finalization & Presentation", "description": "Polish UI, fix bugs, prepare demo and presentation materials."},
]
