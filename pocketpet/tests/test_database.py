import sqlite3

from pocketpet.database import DatabaseManager, pet_to_row, row_to_pet
from pocketpet.models import Action, CauseOfDeath, Pet, PetStatus, Species
from pocketpet.scheduler import PetSession


def test_session_survives_a_restart(tmp_path):
    db_path = str(tmp_path / "pets.db")
    session = PetSession()
    fox = session.create_pet("Bobo", Species.FOX, now=100.0)
    axolotl = session.create_pet("Axel", Species.AXOLOTL, now=200.0)
    session.perform(Action.TOGGLE_RADIO)

    db = DatabaseManager(db_path)
    db.save_session(session)
    db.close()

    db = DatabaseManager(db_path)
    loaded = db.load_session()
    db.close()
    assert set(loaded.pets) == {fox.id, axolotl.id}
    assert loaded.active_id == axolotl.id
    assert loaded.active_pet == session.pets[axolotl.id]
    assert loaded.active_pet.status == PetStatus.DANCING
    assert loaded.active_pet.radio_on is True


def test_dead_pet_round_trip_keeps_cause(tmp_path):
    db = DatabaseManager(str(tmp_path / "pets.db"))
    pet = Pet(id="gone", dead=True, status=PetStatus.DEAD, cause_of_death=CauseOfDeath.HEARTBREAK)
    db.save_pet(pet)
    assert db.load_pets()["gone"] == pet
    db.delete_pet("gone")
    assert db.load_pets() == {}
    db.close()


def test_fresh_database_is_an_empty_session(tmp_path):
    db = DatabaseManager(str(tmp_path / "pets.db"))
    session = db.load_session()
    assert session.pets == {}
    assert session.active_pet is None
    db.close()


def test_old_database_gets_missing_columns(tmp_path):
    db_path = str(tmp_path / "old.db")
    conn = sqlite3.connect(db_path)
    conn.execute("CREATE TABLE pets (id TEXT PRIMARY KEY, name TEXT, status TEXT, hunger REAL)")
    conn.execute("INSERT INTO pets VALUES ('legacy', 'Oldie', 'Training', 70.0)")
    conn.commit()
    conn.close()

    db = DatabaseManager(db_path)
    pet = db.load_pets()["legacy"]
    db.close()
    assert pet.name == "Oldie"
    assert pet.hunger == 70.0
    assert pet.status == PetStatus.IDLE
    assert pet.species == Species.FOX
    assert pet.health == 100.0


def test_row_conversion_stores_enums_by_name():
    row = pet_to_row(Pet(species=Species.AXOLOTL, status=PetStatus.SLEEPING, sick=True))
    assert row['species'] == "AXOLOTL"
    assert row['status'] == "SLEEPING"
    assert row['sick'] == 1
    assert row['cause_of_death'] is None


def test_garbage_file_is_set_aside_and_replaced(tmp_path):
    db_path = tmp_path / "pets.db"
    db_path.write_bytes(b"this is not a sqlite database at all" * 100)

    db = DatabaseManager(str(db_path))
    session = db.load_session()
    assert session.pets == {}
    assert session.active_pet is None
    assert (tmp_path / "pets.db.corrupt").exists()

    db.save_pet(Pet(id="fresh", name="Bobo"))
    assert db.load_pets()["fresh"].name == "Bobo"
    db.close()


def test_unreadable_row_is_skipped(tmp_path):
    db = DatabaseManager(str(tmp_path / "pets.db"))
    db.save_pet(Pet(id="good", name="Bobo"))
    db.conn.execute("INSERT INTO pets (id, name, species) VALUES ('bad', 'Smaug', 'DRAGON')")
    db.conn.commit()

    pets = db.load_pets()
    db.close()
    assert list(pets) == ["good"]


def test_missing_session_table_starts_fresh(tmp_path):
    db = DatabaseManager(str(tmp_path / "pets.db"))
    db.save_pet(Pet(id="good"))
    db.conn.execute("DROP TABLE session")
    db.conn.commit()

    session = db.load_session()
    db.close()
    assert session.pets == {}
    assert session.active_id is None


def test_time_of_death_is_stored(tmp_path):
    db = DatabaseManager(str(tmp_path / "pets.db"))
    pet = Pet(id="gone", dead=True, status=PetStatus.DEAD,
              cause_of_death=CauseOfDeath.ILLNESS, died_at=1234.5)
    db.save_pet(pet)
    assert db.load_pets()["gone"].died_at == 1234.5
    db.close()
