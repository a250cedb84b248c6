"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- users/         → get_users_excluding, match_password, get_user_generation
- conversations/ → list_conversations
- messages/      → list_messages
"""
