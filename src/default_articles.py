"""
Welcome articles written to an empty article store on first startup.
"""

DEFAULT_ARTICLES = [
    {
        "id": 1,
        "title": "My Journey into Software Engineering",
        "content": (
            "She believed in herself that she can do it. She is a software engineer, "
            "she codes and she loves it!\n\n"
            "The journey began with a simple \"Hello World\" program, but it quickly "
            "evolved into a passion for creating elegant solutions to complex problems. "
            "Every day brings new challenges and opportunities to learn."
        ),
        "date": "2025-08-01",
        "author": "Felister Paul",
    },
    {
        "id": 2,
        "title": "The Power of Persistence in Coding",
        "content": (
            "Debugging can be frustrating, but it's also where the most valuable learning "
            "happens. Each error message is a puzzle waiting to be solved, each bug a "
            "lesson in disguise.\n\n"
            "Through persistence and dedication, what once seemed impossible becomes "
            "achievable. The key is to never stop learning and always believe in your "
            "capabilities."
        ),
        "date": "2025-07-28",
        "author": "Felister Paul",
    },
]
