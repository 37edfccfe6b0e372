# Services package init
"""
QnA Backend — Services Layer
==============================

What:  Business logic layer sitting between routes (HTTP) and DAOs (persistence).
How:   Services receive the DAO to use on every call, delegate to it, and
       re-type storage errors into BadRequestError / InternalError.

Service Inventory:
    - QuestionService: create, list and delete questions
    - AnswerService: create, list-by-question and delete answers
"""
