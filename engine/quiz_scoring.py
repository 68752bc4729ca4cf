"""Grade a book quiz and build tiered reading feedback."""
from config.settings import FEEDBACK_TIERS


def score_percent(answers, answer_key):
    """Grade answers against the key.

    Args:
        answers: list of chosen option indexes; None for unanswered.
        answer_key: list of correct option indexes.

    Returns (score, correct_count) where score is a rounded 0-100 int.
    """
    if not isinstance(answers, list) or not isinstance(answer_key, list):
        raise ValueError('answers and answer_key must be lists')
    if not answer_key:
        raise ValueError('Quiz has no questions')
    if len(answers) != len(answer_key):
        raise ValueError(
            f'Expected {len(answer_key)} answers, got {len(answers)}'
        )

    correct = sum(1 for given, right in zip(answers, answer_key)
                  if given is not None and given == right)
    # Round half up; round() would send 62.5 to 62
    score = int(correct / len(answer_key) * 100 + 0.5)
    return score, correct


def build_feedback(score, book_title, tiers=FEEDBACK_TIERS):
    """Summary, strengths, weaknesses and suggestions for a quiz score."""
    if score >= tiers['excellent']:
        return {
            'summary': (f'Excellent work! You scored {score}% on {book_title}. '
                        'You demonstrate exceptional comprehension and analytical skills.'),
            'strengths': [
                'Strong understanding of main themes',
                'Excellent recall of story details',
                'Good grasp of literary analysis concepts',
            ],
            'weaknesses': [],
            'suggestions': [
                'Continue challenging yourself with books at higher Lexile levels',
                'Try writing your own analysis essays to deepen your skills',
            ],
        }
    if score >= tiers['good']:
        return {
            'summary': (f'Good job! You scored {score}% on {book_title}. '
                        'You show solid reading comprehension with room for growth.'),
            'strengths': [
                'Good understanding of plot and characters',
                'Solid recall of key events',
            ],
            'weaknesses': [
                'Could improve on deeper thematic analysis',
                'Some difficulty with literary devices',
            ],
            'suggestions': [
                'Re-read sections about symbolism and themes',
                'Practice identifying literary devices while reading',
                'Discuss the book with classmates to gain new perspectives',
            ],
        }
    if score >= tiers['basic']:
        return {
            'summary': (f'You scored {score}% on {book_title}. '
                        'You grasp the basics but need to work on deeper comprehension.'),
            'strengths': [
                'Basic understanding of plot structure',
                'Identified main characters correctly',
            ],
            'weaknesses': [
                'Difficulty with inference questions',
                'Struggled with thematic analysis',
                'Need to focus more on details while reading',
            ],
            'suggestions': [
                'Try reading the book again more slowly',
                'Take notes while reading to track important details',
                'Ask your teacher for additional support materials',
                'Practice with books at a slightly lower Lexile level',
            ],
        }
    return {
        'summary': (f'You scored {score}% on {book_title}. '
                    'This book may be challenging for your current level.'),
        'strengths': ['You completed the quiz - great effort!'],
        'weaknesses': [
            'This book may be above your current reading level',
            'Need more practice with comprehension strategies',
            'Difficulty with both recall and analysis questions',
        ],
        'suggestions': [
            'Try books at a lower Lexile level to build confidence',
            'Read in shorter sessions and take notes',
            'Ask for help from your teacher or reading specialist',
            'Practice with guided reading exercises',
            "Don't give up - every reader improves with practice!",
        ],
    }
