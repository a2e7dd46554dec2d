# Area: Provider
"""
mindforge._provider.demo_bank — Bundled puzzles for demo mode
==============================================================

Used by DemoLLMClient so the game can be played without an API key.
Entries use the same JSON shape the model is asked to produce.
"""

DEMO_QUESTIONS = [
    {
        "category": "Series Completion",
        "questionText": "Which number comes next: 3, 9, 27, 81, ...?",
        "options": ["162", "243", "324", "108"],
        "correctAnswer": "243",
        "explanation": "Each term is three times the previous one: 81 × 3 = 243.",
        "hint": "Look at the ratio between neighbours.",
    },
    {
        "category": "Analogy",
        "questionText": "Tree is to Forest as Book is to ?",
        "options": ["Page", "Library", "Author", "Paper"],
        "correctAnswer": "Library",
        "explanation": "A forest is a large collection of trees; a library is a large collection of books.",
        "hint": "Think of a place holding many of them.",
    },
    {
        "category": "Classification",
        "questionText": "Which one does not belong: Copper, Iron, Bronze, Zinc?",
        "options": ["Copper", "Iron", "Bronze", "Zinc"],
        "correctAnswer": "Bronze",
        "explanation": "Bronze is an alloy; the others are pure metallic elements.",
        "hint": "One of them is a mixture.",
    },
    {
        "category": "Coding-Decoding",
        "questionText": "If CAT is written as DBU, how is DOG written?",
        "options": ["EPH", "CNF", "EOG", "DPH"],
        "correctAnswer": "EPH",
        "explanation": "Every letter is shifted forward by one: D→E, O→P, G→H.",
        "hint": "Compare each letter with its code letter.",
    },
    {
        "category": "Blood Relations",
        "questionText": "Pointing to a man, Anna says: \"His mother is the only daughter of my mother.\" How is Anna related to the man?",
        "options": ["Sister", "Aunt", "Mother", "Grandmother"],
        "correctAnswer": "Mother",
        "explanation": "The only daughter of Anna's mother is Anna herself, so Anna is the man's mother.",
        "hint": "Who is the only daughter of Anna's mother?",
    },
    {
        "category": "Direction Sense",
        "questionText": "Ravi walks 5 km north, turns right and walks 3 km, then turns right again and walks 5 km. Which direction is he from his start?",
        "options": ["North", "South", "East", "West"],
        "correctAnswer": "East",
        "explanation": "The two 5 km legs cancel out, leaving him 3 km east of the start.",
        "hint": "Draw the path on paper.",
    },
    {
        "category": "Syllogisms",
        "questionText": "All roses are flowers. Some flowers fade quickly. Which conclusion follows?",
        "options": [
            "All roses fade quickly",
            "Some roses fade quickly",
            "No rose fades quickly",
            "None of these follows",
        ],
        "correctAnswer": "None of these follows",
        "explanation": "The flowers that fade quickly may or may not include roses, so no conclusion about roses is certain.",
        "hint": "Does \"some flowers\" have to include roses?",
    },
    {
        "category": "Visual Reasoning",
        "questionText": "Which shape replaces the question mark?",
        "options": ["Square", "Pentagon", "Hexagon", "Circle"],
        "correctAnswer": "Pentagon",
        "explanation": "Each shape has one more side than the previous one: 3, 4, then 5.",
        "hint": "Count the sides.",
        "visualSVG": (
            '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 300 150">'
            '<polygon points="30,110 70,40 110,110" stroke="white" stroke-width="2" fill="none"/>'
            '<rect x="130" y="45" width="60" height="60" stroke="white" stroke-width="2" fill="none"/>'
            '<text x="245" y="90" fill="white" font-size="40">?</text>'
            "</svg>"
        ),
    },
]
