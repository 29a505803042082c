"""
Analysis app

Scores applicant/project compatibility through a language model, stores
exactly one result per application, and assigns roles to a fully staffed
team.
"""
