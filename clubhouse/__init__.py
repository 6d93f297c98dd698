"""
Clubhouse - multi-sport club schema

Responsibilities:
- Table definitions for clubs, sports, members, teams, rosters,
  tournaments, venues and matches
- Uniqueness, enumeration and reference checks on every row operation
- Cascade deletion along ownership edges, reference clearing for
  coaches and referees
- Sample dataset seeding
"""
