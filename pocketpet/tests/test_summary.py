from pocketpet.models import CauseOfDeath, Pet, PetStatus, Species
from pocketpet.summary import format_duration, format_summary, summarize_life


def test_summary_of_a_starved_pet():
    pet = Pet(name="Bobo", species=Species.FOX, age=4, birth_time=0.0, last_simulated_at=7500.0,
              dead=True, status=PetStatus.DEAD, cause_of_death=CauseOfDeath.STARVATION,
              hunger=100, mood=40.4, energy=12.6, weight=30, health=55)
    s = summarize_life(pet)
    assert s.name == "Bobo"
    assert s.species == "Fox"
    assert s.age == 4
    assert s.phase == "Toddler"
    assert s.cause == "Starvation"
    assert s.real_seconds_lived == 7500.0
    assert s.vitals == {'hunger': 100, 'mood': 40, 'energy': 13, 'weight': 30, 'health': 55}
    # 0.25*40.4 + 0 + 0.2*55 + 0 + 0.15*100 = 36.1
    assert s.score == 36
    assert s.grade == "F"


def test_unknown_cause_when_alive():
    assert summarize_life(Pet()).cause == "Unknown"


def test_format_duration():
    assert format_duration(7500) == "2h 05m"
    assert format_duration(90061) == "1d 1h 01m"
    assert format_duration(-3) == "0h 00m"


def test_format_summary_lines():
    pet = Pet(name="Mochi", dead=True, status=PetStatus.DEAD, cause_of_death=CauseOfDeath.OLD_AGE,
              age=10, last_simulated_at=3600.0)
    lines = format_summary(summarize_life(pet))
    assert lines[0] == "Mochi the Fox"
    assert "Cause: Old Age" in lines
    assert any(line.startswith("Rank: ") for line in lines)
    assert "  Health: 100/100" in lines


def test_lifespan_ends_at_time_of_death():
    pet = Pet(birth_time=100.0, died_at=3700.0, last_simulated_at=999999.0,
              dead=True, status=PetStatus.DEAD, cause_of_death=CauseOfDeath.ILLNESS)
    assert summarize_life(pet).real_seconds_lived == 3600.0
