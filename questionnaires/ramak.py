"""
RAMAK questionnaire → trait category mappings (LITERAL)

Rules:
- Indices are 0-based positions in the 72-question questionnaire
- Copy lists verbatim, do not derive them
- Some indices appear under more than one category, some under none

This file ONLY declares:
- which questions feed which category, at which level
- how answers and levels are weighted
"""


NUM_QUESTIONS = 72


# ======================================================
# QUESTION ASSIGNMENT
# category -> level -> 3 question indices
# ======================================================

QUESTION_ASSIGNMENT = {
    "Business": {
        "Level 1": [9, 45, 54],
        "Level 2": [20, 28, 36],
        "Level 3": [2, 59, 68],
    },
    "GeneralCulture": {
        "Level 1": [21, 30, 51],
        "Level 2": [4, 10, 46],
        "Level 3": [35, 62, 71],
    },
    "ArtsAndEntertainment": {
        "Level 1": [3, 27, 52],
        "Level 2": [13, 34, 60],
        "Level 3": [23, 44, 67],
    },
    "Science": {
        "Level 1": [7, 15, 57],
        "Level 2": [22, 25, 43],
        "Level 3": [32, 53, 65],
    },
    "Organization": {
        "Level 1": [12, 18, 66],
        "Level 2": [7, 37, 40],
        "Level 3": [11, 29, 41],
    },
    "Service": {
        "Level 1": [0, 33, 48],
        "Level 2": [19, 58, 64],
        "Level 3": [11, 29, 41],
    },
    "Outdoor": {
        "Level 1": [38, 63, 69],
        "Level 2": [1, 31, 50],
        "Level 3": [2, 8, 17],
    },
    "Technology": {
        "Level 1": [24, 39, 42],
        "Level 2": [16, 49, 70],
        "Level 3": [5, 14, 61],
    },
}


# ======================================================
# LEVEL WEIGHTS
# ======================================================

LEVEL_WEIGHTS = {
    "Level 1": 3,
    "Level 2": 2,
    "Level 3": 1,
}


# ======================================================
# ANSWER POINTS
# Y / ? / N are the codes the questionnaire form submits
# ======================================================

ANSWER_POINTS = {
    "Yes": 2,
    "Unsure": 1,
    "No": 0,
    "Y": 2,
    "?": 1,
    "N": 0,
}

MAX_ANSWER_POINTS = 2


# ======================================================
# NORMALISATION CONSTANTS (per category)
# ======================================================

QUESTIONS_PER_CATEGORY = sum(len(items) for items in QUESTION_ASSIGNMENT["Business"].values())

# 9 questions, 2 points each
MAX_RAW_SCORE = QUESTIONS_PER_CATEGORY * MAX_ANSWER_POINTS

# 3*2*3 + 2*2*3 + 1*2*3
MAX_WEIGHTED_SCORE = sum(
    weight * MAX_ANSWER_POINTS * len(QUESTION_ASSIGNMENT["Business"][level])
    for level, weight in LEVEL_WEIGHTS.items()
)
