"""레포지토리 패키지: 데이터베이스 쿼리 계층.

Repository package: Query layer for locations, employees, shifts,
reward usage settings and back-office accounts. Repositories only flush;
routers own the commit.
"""
