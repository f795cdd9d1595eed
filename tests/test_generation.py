import logging

import pytest

from responsesim import config
from responsesim.engines.generation import (
    generate_random_incidents,
    generate_round_incidents,
    normalise_incident_type,
    read_custom_incident,
)
from responsesim.engines.rng import RNG
from responsesim.entities import Incident
from responsesim.output.render import ConsoleClosedError


def test_random_incidents_draw_type_then_location(sequence_rng):
    rng = sequence_rng([0, 0, 1, 3, 2, 5])
    incidents = generate_random_incidents(rng, config.DEFAULT_LOCATIONS, count=3)
    assert incidents == [
        Incident("Fire", "Downtown"),
        Incident("Crime", "Industrial Park"),
        Incident("Medical", "Main St"),
    ]
    assert rng.calls == [3, 6, 3, 6, 3, 6]


def test_random_incidents_stay_within_catalogue():
    incidents = generate_random_incidents(RNG(99), config.DEFAULT_LOCATIONS, count=50)
    assert len(incidents) == 50
    assert {incident.type for incident in incidents} <= set(config.INCIDENT_TYPES)
    assert {incident.location for incident in incidents} <= set(config.DEFAULT_LOCATIONS)


@pytest.mark.parametrize("raw", ["fire", "FIRE", "Fire", "  fIrE "])
def test_custom_type_is_normalised(raw):
    assert normalise_incident_type(raw) == "Fire"


def test_normalise_rejects_unknown():
    assert normalise_incident_type("Flood") is None
    assert normalise_incident_type("") is None


def test_custom_incident_reprompts_until_valid(make_renderer):
    renderer = make_renderer("", "flood", "medical", "City Park")
    incident = read_custom_incident(renderer)
    assert incident == Incident("Medical", "City Park")
    errors = [line for line in renderer.lines if line.startswith("Invalid incident type")]
    assert len(errors) == 2


def test_blank_location_uses_placeholder(make_renderer, caplog):
    caplog.set_level(logging.INFO, logger="responsesim.engines.generation")
    renderer = make_renderer("CRIME", "   ")
    incident = read_custom_incident(renderer)
    assert incident == Incident("Crime", "Unknown Location")
    assert "Location not specified, using 'Unknown Location'." in renderer.lines
    records = [r for r in caplog.records if r.getMessage() == "incident.location.defaulted"]
    assert len(records) == 1
    assert records[0].incident_type == "Crime"


def test_closed_input_location_uses_placeholder(make_renderer):
    renderer = make_renderer("Fire")
    assert read_custom_incident(renderer) == Incident("Fire", "Unknown Location")


def test_closed_input_during_type_prompt_raises(make_renderer):
    renderer = make_renderer("nope")
    with pytest.raises(ConsoleClosedError):
        read_custom_incident(renderer)


def test_choice_one_generates_random_batch(make_renderer):
    incidents = generate_round_incidents(
        "1", rng=RNG(1), locations=config.DEFAULT_LOCATIONS, renderer=make_renderer()
    )
    assert len(incidents) == 5


def test_choice_two_reads_single_incident(make_renderer):
    renderer = make_renderer("fire", "Downtown")
    incidents = generate_round_incidents(
        "2", rng=RNG(1), locations=config.DEFAULT_LOCATIONS, renderer=renderer
    )
    assert incidents == [Incident("Fire", "Downtown")]


@pytest.mark.parametrize("choice", ["3", "", "random", None])
def test_invalid_choice_falls_back_to_random(make_renderer, choice, caplog):
    caplog.set_level(logging.INFO, logger="responsesim.engines.generation")
    renderer = make_renderer()
    incidents = generate_round_incidents(
        choice, rng=RNG(1), locations=config.DEFAULT_LOCATIONS, renderer=renderer
    )
    assert len(incidents) == 5
    assert "Invalid choice. Generating 5 random incidents by default..." in renderer.lines
    records = [r for r in caplog.records if r.getMessage() == "round.choice.invalid"]
    assert len(records) == 1
    assert records[0].choice == choice


def test_valid_choice_logs_no_fallback(make_renderer, caplog):
    caplog.set_level(logging.INFO, logger="responsesim.engines.generation")
    generate_round_incidents("1", rng=RNG(1), locations=config.DEFAULT_LOCATIONS, renderer=make_renderer())
    assert not [r for r in caplog.records if r.getMessage() == "round.choice.invalid"]
