"""Lexile — centralized configuration."""
import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DB_PATH = os.environ.get('LEXILE_DB_PATH', os.path.join(BASE_DIR, 'lexile.db'))

SECRET_KEY = os.environ.get('SECRET_KEY', 'lexile-dev-key')

# Lexile defaults
LEXILE_DEFAULTS = {
    'initial_student_lexile': 400,
    'default_book_lexile': 500,
    'min_lexile': 0,
    'history_limit': 30,
    'recommendation_window': 100,
}

# Adjustment policy. Tiers are (min_score, ...) checked top-down, first match wins.
LEXILE_POLICY = {
    'challenging_threshold': 50,   # book - student > this
    'easy_threshold': -50,         # book - student < this
    'max_change': 30,

    'challenging': {
        'high_score': 80,
        'high_cap': 30,
        'high_divisor': 2,
        'mid_score': 60,
        'mid_cap': 20,
        'mid_divisor': 3,
        'low_floor': -5,
    },
    'easy': {
        'high_score': 90,
        'high_cap': 10,
        'mid_score': 70,
        'mid_cap': 5,
        'low_floor': -25,
        'low_multiplier': 2,
    },
    'just_right': [
        (85, 15),
        (70, 10),
        (60, 5),
        (0, -5),
    ],

    'reasons': {
        ('challenging', 'high'): 'Excellent performance on challenging material!',
        ('challenging', 'mid'): 'Good effort on challenging material!',
        ('challenging', 'low'): 'Keep practicing with challenging material',
        ('easy', 'high'): 'Great work! Try more challenging books',
        ('easy', 'mid'): 'Good, but you can do better!',
        ('easy', 'low'): 'Review the fundamentals before moving on',
        ('just_right', 85): 'Perfect level! Keep up the great work!',
        ('just_right', 70): 'Nice progress at your level!',
        ('just_right', 60): 'Keep practicing at this level',
        ('just_right', 0): 'Take time to understand the material',
    },
}

# Quiz feedback tiers (score >= key)
FEEDBACK_TIERS = {
    'excellent': 90,
    'good': 70,
    'basic': 50,
}
