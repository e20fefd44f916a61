"""Centralized mock data for the console's in-memory directories.

Stores copy these seeds on construction, so mutating a store never
changes the module-level data.
"""

from datetime import date

STUDENTS = [
    {"id": 1, "name": "Maria Silva", "email": "maria@escola.com", "class_name": "Turma A", "status": "Ativo"},
    {"id": 2, "name": "João Pereira", "email": "joao@escola.com", "class_name": "Turma B", "status": "Inativo"},
    {"id": 3, "name": "Carla Souza", "email": "carla@escola.com", "class_name": "Turma A", "status": "Ativo"},
]

CLASSES = [
    {"id": 1, "name": "Turma A", "capacity": 30},
    {"id": 2, "name": "Turma B", "capacity": 25},
    {"id": 3, "name": "Turma C", "capacity": 35},
]

UPCOMING_EVALUATIONS = [
    {"id": 1, "class_name": "Turma A", "scheduled_date": date(2025, 11, 15), "description": "Prova 1 - Matemática"},
    {"id": 2, "class_name": "Turma B", "scheduled_date": date(2025, 11, 20), "description": "Trabalho de História"},
    {"id": 3, "class_name": "Turma C", "scheduled_date": date(2025, 11, 25), "description": "Avaliação Final - Ciências"},
]
