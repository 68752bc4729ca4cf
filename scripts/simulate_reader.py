#!/usr/bin/env python3
"""Simulate a reader taking quizzes against a running server.

Creates a student and a small shelf of books around their level, then
submits a quiz score per book and prints how the lexile moves.

Usage:
    python3 scripts/simulate_reader.py [--base-url URL] [--quizzes N]
"""
import argparse
import random
import sys

import requests

BASE_URL = 'http://localhost:5002'


def ensure_book(http, base_url, title, lexile_level):
    resp = http.post(f'{base_url}/books/', json={
        'title': title, 'author': 'Simulated', 'lexile_level': lexile_level,
    })
    if resp.status_code == 409:
        books = http.get(f'{base_url}/books/').json()['books']
        return next(b for b in books
                    if b['title'] == title and b['author'] == 'Simulated')
    resp.raise_for_status()
    return resp.json()


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('--base-url', default=BASE_URL)
    parser.add_argument('--quizzes', type=int, default=12)
    parser.add_argument('--start-lexile', type=int, default=500)
    parser.add_argument('--skill', type=float, default=0.75,
                        help='chance of answering each question correctly')
    parser.add_argument('--seed', type=int)
    args = parser.parse_args()

    rng = random.Random(args.seed)
    http = requests.Session()

    name = f'SimReader-{rng.randint(1000, 9999)}'
    resp = http.post(f'{args.base_url}/students/', json={
        'name': name, 'lexile_level': args.start_lexile,
    })
    resp.raise_for_status()
    student = resp.json()
    print(f"Created {name} at {student['lexile_level']}L")

    for i in range(args.quizzes):
        level = student['lexile_level']
        book_lexile = max(0, level + rng.choice([-100, -20, 0, 40, 120]))
        book = ensure_book(http, args.base_url, f'Sim Book {book_lexile}L', book_lexile)

        answer_key = [rng.randint(0, 3) for _ in range(10)]
        answers = [k if rng.random() < args.skill else (k + 1) % 4
                   for k in answer_key]

        resp = http.post(f'{args.base_url}/quiz/submit', json={
            'student_id': student['id'],
            'book_id': book['id'],
            'answers': answers,
            'answer_key': answer_key,
        })
        if resp.status_code != 200:
            print(f"Quiz {i + 1} failed: {resp.status_code} {resp.text}")
            return 1
        result = resp.json()
        print(f"Q{i + 1:>2}: book {book_lexile:>4}L  score {result['score']:>3}%  "
              f"{result['lexile_before']}L -> {result['new_lexile']}L "
              f"({result['change_display']})  {result['reason']}")
        student['lexile_level'] = result['new_lexile']

    print(f"\nFinal lexile: {student['lexile_level']}L "
          f"(started at {args.start_lexile}L)")
    return 0


if __name__ == '__main__':
    sys.exit(main())
