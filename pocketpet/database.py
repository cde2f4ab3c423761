import logging
import os
import sqlite3
from dataclasses import fields

from pocketpet.models import CauseOfDeath, Pet, PetStatus, Species
from pocketpet.scheduler import PetSession

logger = logging.getLogger(__name__)

# Column name -> SQL type, in table order
PET_COLUMNS = {
    'id': 'TEXT PRIMARY KEY',
    'name': 'TEXT', 'species': 'TEXT',
    'birth_time': 'REAL', 'last_simulated_at': 'REAL',
    'life_expectancy': 'INTEGER', 'age': 'INTEGER',
    'status': 'TEXT',
    'hunger': 'REAL', 'mood': 'REAL', 'energy': 'REAL', 'weight': 'REAL', 'health': 'REAL',
    'special': 'INTEGER', 'sick': 'INTEGER', 'dirty': 'INTEGER', 'dead': 'INTEGER',
    'mess_count': 'INTEGER', 'lifetime_mess_count': 'INTEGER',
    'meals_since_mess': 'INTEGER', 'penalty_count': 'INTEGER',
    'minute_of_day': 'INTEGER', 'age_progress': 'INTEGER',
    'starving_time': 'INTEGER', 'overfull_time': 'INTEGER', 'low_mood_time': 'INTEGER',
    'fitness_time': 'INTEGER', 'distress_time': 'INTEGER',
    'dirty_time': 'INTEGER', 'sick_time': 'INTEGER', 'sleep_time': 'INTEGER',
    'radio_on': 'INTEGER',
    'caretaker_score': 'INTEGER',
    'cause_of_death': 'TEXT',
    'died_at': 'REAL',
}

BOOL_COLUMNS = ('special', 'sick', 'dirty', 'dead', 'radio_on')


def pet_to_row(pet):
    row = {f.name: getattr(pet, f.name) for f in fields(pet)}
    row['species'] = pet.species.name
    row['status'] = pet.status.name
    row['cause_of_death'] = pet.cause_of_death.name if pet.cause_of_death else None
    for key in BOOL_COLUMNS:
        row[key] = 1 if row[key] else 0
    return row


def row_to_pet(row):
    """Build a Pet from a stored row. Missing columns keep the Pet defaults."""
    data = {key: row[key] for key in row.keys() if key in PET_COLUMNS and row[key] is not None}
    data['species'] = Species[data.get('species', Species.FOX.name)]
    data['status'] = PetStatus(data.get('status', PetStatus.IDLE.name))
    if 'cause_of_death' in data:
        data['cause_of_death'] = CauseOfDeath[data['cause_of_death']]
    for key in BOOL_COLUMNS:
        if key in data:
            data[key] = bool(data[key])
    return Pet(**data)


class DatabaseManager:
    """Handles SQL persistence to keep the pets 'alive' on disk."""
    def __init__(self, db_path):
        self.db_path = str(db_path)
        self.conn = None
        try:
            self._open()
        except sqlite3.DatabaseError as e:
            logger.warning("Loading failed, starting fresh (Error: %s)", e)
            if self.conn is not None:
                self.conn.close()
            self._set_aside()
            self._open()

    def _open(self):
        self.conn = sqlite3.connect(self.db_path)
        self.conn.row_factory = sqlite3.Row
        self.create_tables()
        self._perform_migrations()

    def _set_aside(self):
        """Move an unreadable database file out of the way, keeping it for inspection."""
        if self.db_path == ":memory:" or not os.path.exists(self.db_path):
            return
        backup = self.db_path + ".corrupt"
        os.replace(self.db_path, backup)
        logger.warning("Moved unreadable database to %s", backup)

    def create_tables(self):
        columns = ",\n            ".join(f"{name} {sql_type}" for name, sql_type in PET_COLUMNS.items())
        self.conn.execute(f"CREATE TABLE IF NOT EXISTS pets (\n            {columns}\n        )")

        # Single-row table remembering which pet was on screen
        self.conn.execute("""
            CREATE TABLE IF NOT EXISTS session (
                id INTEGER PRIMARY KEY CHECK (id = 1),
                active_pet_id TEXT
            )
        """)
        self.conn.commit()

    def _perform_migrations(self):
        """Add any columns that older databases don't have yet."""
        cursor = self.conn.execute("PRAGMA table_info(pets)")
        existing = {column[1] for column in cursor.fetchall()}
        for name, sql_type in PET_COLUMNS.items():
            if name not in existing:
                logger.info("Performing migration: adding column '%s' to 'pets' table.", name)
                self.conn.execute(f"ALTER TABLE pets ADD COLUMN {name} {sql_type.replace(' PRIMARY KEY', '')}")
        self.conn.commit()

    def save_pet(self, pet):
        row = pet_to_row(pet)
        names = ", ".join(row)
        placeholders = ", ".join(f":{key}" for key in row)
        self.conn.execute(f"INSERT OR REPLACE INTO pets ({names}) VALUES ({placeholders})", row)
        self.conn.commit()

    def delete_pet(self, pet_id):
        self.conn.execute("DELETE FROM pets WHERE id = ?", (pet_id,))
        self.conn.commit()

    def set_active_pet(self, pet_id):
        self.conn.execute("INSERT OR REPLACE INTO session (id, active_pet_id) VALUES (1, ?)", (pet_id,))
        self.conn.commit()

    def load_pets(self):
        pets = {}
        for row in self.conn.execute("SELECT * FROM pets"):
            try:
                pet = row_to_pet(row)
            except (KeyError, ValueError, TypeError) as e:
                logger.warning("Skipping unreadable pet row %s: %s", row['id'], e)
                continue
            pets[pet.id] = pet
        return pets

    def load_active_pet_id(self):
        row = self.conn.execute("SELECT active_pet_id FROM session WHERE id = 1").fetchone()
        return row['active_pet_id'] if row else None

    def save_session(self, session):
        for pet in session.pets.values():
            self.save_pet(pet)
        self.set_active_pet(session.active_id)

    def load_session(self, **session_kwargs):
        """Rebuild a PetSession from disk, starting fresh if the data can't be read."""
        try:
            pets = self.load_pets()
            active_id = self.load_active_pet_id()
        except sqlite3.Error as e:
            logger.warning("Loading failed, starting fresh (Error: %s)", e)
            return PetSession(**session_kwargs)
        return PetSession(pets, active_id, **session_kwargs)

    def close(self):
        self.conn.close()
