# Routes package init
"""
QnA Backend — API Routes Package
==================================

Route Inventory:
    - questions.py:  POST /question, GET /questions, DELETE /question
    - answers.py:    POST /answer,   GET /answers,   DELETE /answer
    - health.py:     GET  /health

Routes are thin: they unwrap the JSON body, call a service with the DAO
injected by FastAPI, and return the result. All validation happens downstream.
"""
