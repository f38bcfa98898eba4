"""
Persisted cosmetic tables.

Table and column names match the schema already deployed alongside the game
server plugin. Composite primary keys carry the uniqueness that every upsert
targets.
"""

from sqlalchemy import Column, Float, Integer, String

from .connection import Base

# Width of the identity column (SteamID64 fits with room to spare)
IDENTITY_LENGTH = 64


class PlayerKnife(Base):
    __tablename__ = "wp_player_knife"

    steamid = Column(String(IDENTITY_LENGTH), primary_key=True)
    team = Column(Integer, primary_key=True, default=0, autoincrement=False)
    knife = Column(String(64), nullable=True)  # NULL reads back as the default knife


class PlayerGloves(Base):
    __tablename__ = "wp_player_gloves"

    steamid = Column(String(IDENTITY_LENGTH), primary_key=True)
    weapon_team = Column(Integer, primary_key=True, default=0, autoincrement=False)
    weapon_defindex = Column(Integer, nullable=True)


class PlayerAgents(Base):
    __tablename__ = "wp_player_agents"

    steamid = Column(String(IDENTITY_LENGTH), primary_key=True)
    agent_ct = Column(String(64), nullable=True)
    agent_t = Column(String(64), nullable=True)


class PlayerMusic(Base):
    __tablename__ = "wp_player_music"

    steamid = Column(String(IDENTITY_LENGTH), primary_key=True)
    team = Column(Integer, primary_key=True, default=0, autoincrement=False)
    music_id = Column(Integer, nullable=True)


class PlayerSkins(Base):
    __tablename__ = "wp_player_skins"

    steamid = Column(String(IDENTITY_LENGTH), primary_key=True)
    weapon_defindex = Column(Integer, primary_key=True, autoincrement=False)
    weapon_team = Column(Integer, primary_key=True, default=0, autoincrement=False)
    weapon_paint_id = Column(Integer, nullable=True)
    weapon_wear = Column(Float, nullable=True)  # Stored as given; never clamped here
    weapon_seed = Column(Integer, nullable=True)
