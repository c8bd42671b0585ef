"""Pytest configuration and shared fixtures."""

import sqlite3

import pytest


def pad(value, width=32):
    """Ingres catalog names are fixed-width char columns."""
    return value.ljust(width) if value is not None else None


CATALOG_DDL = [
    """
    CREATE TABLE iikeys (
        constraint_name TEXT,
        table_name TEXT,
        schema_name TEXT,
        column_name TEXT,
        key_position INTEGER
    )
    """,
    """
    CREATE TABLE iiconstraints (
        constraint_name TEXT,
        table_name TEXT,
        schema_name TEXT,
        constraint_type TEXT,
        text_segment TEXT
    )
    """,
    """
    CREATE TABLE iiref_constraints (
        ref_constraint_name TEXT,
        ref_schema_name TEXT,
        ref_table_name TEXT,
        unique_constraint_name TEXT,
        unique_schema_name TEXT,
        unique_table_name TEXT
    )
    """,
]

KEYS = [
    ("$country_pk", "country", "martin", "ct_code", 1),
    ("$airline_pk", "airline", "martin", "al_iatacode", 1),
    ("$route_pk", "route", "ingres", "rt_airline", 1),
    ("$route_pk", "route", "ingres", "rt_flight_num", 2),
]

CONSTRAINTS = [
    ("$country_pk", "country", "martin", "P", "PRIMARY KEY (ct_code)"),
    ("$airline_u1", "airline", "martin", "U", "UNIQUE (al_icaocode)"),
    ("$airline_u2", "airline", "martin", "U", 'UNIQUE ("Al Name", al_ccode)'),
    ("$airline_c1", "airline", "martin", "C", "CHECK (al_iatacode <> '')"),
    ("$airline_r1", "airline", "martin", "R", 'FOREIGN KEY (al_ccode) REFERENCES "martin".country(ct_code)'),
    ("$route_pk", "route", "ingres", "P", "PRIMARY KEY (rt_airline, rt_flight_num)"),
    ("$route_u1", "route", "ingres", "U", "UNIQUE (rt_depart_from, rt_arrive_to, rt_flight_day)"),
    ("$route_r1", "route", "ingres", "R",
     'FOREIGN KEY (rt_airline, rt_depart_from) REFERENCES "ingres".flight(fl_airline, fl_from)'),
    ("$legacy_u1", "legacy", "ingres", "U", None),
]

REF_CONSTRAINTS = [
    ("$airline_r1", "martin", "airline", "$country_pk", "martin", "country"),
    ("$route_r1", "ingres", "route", "$flight_pk", "ingres", "flight"),
]


def build_catalog(conn):
    """Create and populate the Ingres catalog tables."""
    for ddl in CATALOG_DDL:
        conn.execute(ddl)

    conn.executemany(
        "INSERT INTO iikeys VALUES (?, ?, ?, ?, ?)",
        [(pad(c), pad(t), pad(s), pad(col), pos) for c, t, s, col, pos in KEYS],
    )
    conn.executemany(
        "INSERT INTO iiconstraints VALUES (?, ?, ?, ?, ?)",
        [(pad(c), pad(t), pad(s), kind, text) for c, t, s, kind, text in CONSTRAINTS],
    )
    conn.executemany(
        "INSERT INTO iiref_constraints VALUES (?, ?, ?, ?, ?, ?)",
        [tuple(pad(v) for v in row) for row in REF_CONSTRAINTS],
    )
    conn.commit()


@pytest.fixture
def catalog_conn():
    """In-memory sqlite database laid out like the Ingres catalogs."""
    conn = sqlite3.connect(":memory:")
    build_catalog(conn)

    yield conn

    conn.close()
