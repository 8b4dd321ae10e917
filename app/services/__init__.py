"""서비스 패키지: 비즈니스 로직 계층.

Service package: Business logic layer.
reward_rules and shift_rotation are pure modules with no database access;
the *_service modules load and store data through repositories and call them.
"""
