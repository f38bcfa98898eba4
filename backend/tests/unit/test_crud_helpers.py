"""
Unit tests for the CRUD helpers.

Checks the SQL emitted by build_upsert for each supported dialect and the
nullable column decoders.
"""

import pytest
from crud.helpers import build_upsert, float_or_default, int_or_default, str_or_default
from infrastructure.database.models import PlayerAgents, PlayerSkins
from sqlalchemy.dialects import mysql, postgresql, sqlite

SKIN_VALUES = {
    "steamid": "S1",
    "weapon_defindex": 7,
    "weapon_team": 2,
    "weapon_paint_id": 12,
    "weapon_wear": 0.15,
    "weapon_seed": 3,
}
SKIN_KEY = ("steamid", "weapon_defindex", "weapon_team")


def _sql(stmt, dialect) -> str:
    return " ".join(str(stmt.compile(dialect=dialect)).split())


class TestBuildUpsert:
    def test_postgresql(self):
        sql = _sql(build_upsert("postgresql", PlayerSkins, SKIN_VALUES, SKIN_KEY), postgresql.dialect())

        assert "ON CONFLICT (steamid, weapon_defindex, weapon_team) DO UPDATE" in sql
        assert "weapon_paint_id = excluded.weapon_paint_id" in sql
        assert "steamid = excluded.steamid" not in sql

    def test_sqlite(self):
        sql = _sql(build_upsert("sqlite", PlayerSkins, SKIN_VALUES, SKIN_KEY), sqlite.dialect())

        assert "ON CONFLICT (steamid, weapon_defindex, weapon_team) DO UPDATE" in sql
        assert "weapon_wear = excluded.weapon_wear" in sql

    def test_mysql(self):
        sql = _sql(build_upsert("mysql", PlayerSkins, SKIN_VALUES, SKIN_KEY), mysql.dialect())

        assert "ON DUPLICATE KEY UPDATE" in sql
        assert "weapon_seed =" in sql
        assert "steamid =" not in sql.split("ON DUPLICATE KEY UPDATE")[1]

    def test_key_only_row_does_nothing_on_conflict(self):
        sql = _sql(build_upsert("postgresql", PlayerAgents, {"steamid": "S1"}, ("steamid",)), postgresql.dialect())
        assert "ON CONFLICT (steamid) DO NOTHING" in sql

    def test_unsupported_dialect(self):
        with pytest.raises(ValueError, match="oracle"):
            build_upsert("oracle", PlayerSkins, SKIN_VALUES, SKIN_KEY)


class TestDecoders:
    def test_int(self):
        assert int_or_default(None) == 0
        assert int_or_default(None, 7) == 7
        assert int_or_default("3") == 3

    def test_float(self):
        assert float_or_default(None) == 0.0
        assert float_or_default(0.25) == 0.25

    def test_str(self):
        assert str_or_default(None) is None
        assert str_or_default("", "weapon_knife") == "weapon_knife"
        assert str_or_default("weapon_bayonet", "weapon_knife") == "weapon_bayonet"
