"""Shared test fixtures for sort-chain."""

from dataclasses import dataclass

import pandas as pd
import pytest
import sqlalchemy as sa


@dataclass
class Player:
    name: str
    team: str
    score: int


@pytest.fixture
def records():
    """Dict records with ties on 'a'."""
    return [
        {"id": 1, "a": 1, "b": 2},
        {"id": 2, "a": 1, "b": 1},
        {"id": 3, "a": 0, "b": 5},
        {"id": 4, "a": 2, "b": 1},
        {"id": 5, "a": 1, "b": 1},
    ]


@pytest.fixture
def players():
    """Attribute-style records."""
    return [
        Player("ann", "red", 10),
        Player("bob", "blue", 7),
        Player("cid", "red", 7),
        Player("dee", "blue", 12),
        Player("eve", "red", 10),
    ]


@pytest.fixture
def players_df():
    """Same players as a DataFrame with a non-default index."""
    return pd.DataFrame(
        {
            "name": ["ann", "bob", "cid", "dee", "eve"],
            "team": ["red", "blue", "red", "blue", "red"],
            "score": [10, 7, 7, 12, 10],
        },
        index=["p1", "p2", "p3", "p4", "p5"],
    )


@pytest.fixture
def players_table():
    metadata = sa.MetaData()
    return sa.Table(
        "players",
        metadata,
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String),
        sa.Column("team", sa.String),
        sa.Column("score", sa.Integer),
    )


@pytest.fixture
def engine(players_table):
    """In-memory SQLite engine with the players table populated."""
    eng = sa.create_engine("sqlite://")
    players_table.metadata.create_all(eng)
    with eng.begin() as conn:
        conn.execute(
            players_table.insert(),
            [
                {"id": 1, "name": "ann", "team": "red", "score": 10},
                {"id": 2, "name": "bob", "team": "blue", "score": 7},
                {"id": 3, "name": "cid", "team": "red", "score": 7},
                {"id": 4, "name": "dee", "team": "blue", "score": 12},
                {"id": 5, "name": "eve", "team": "red", "score": 9},
            ],
        )
    yield eng
    eng.dispose()
