"""Tests for the validation pipeline."""

from datetime import date

import pytest

from vacation_planner.exceptions import NotFoundError


@pytest.mark.asyncio
async def test_clean_request_has_no_errors(validator, make_request):
    result = await validator.validate(make_request("2026-06-01", "2026-06-07"))
    assert result.errors == {}
    assert result.valid is True


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "start, end",
    [("2026-13-01", "2026-06-07"), ("2026-06-01", "yesterday"), (None, "2026-06-07"), ("", "")],
)
async def test_malformed_dates_only_report_format(validator, make_request, start, end):
    result = await validator.validate(make_request(start, end))
    assert result.errors == {"format": "Dates were not properly formatted"}


@pytest.mark.asyncio
async def test_short_segment_only_reports_end_at(validator, make_request):
    # Also PTO and outside the scheduling year, neither of which is reached
    result = await validator.validate(make_request("2025-06-01", "2025-06-03", pto=True))
    assert list(result.errors) == ["end_at"]


@pytest.mark.asyncio
async def test_end_before_start_is_too_short(validator, make_request):
    result = await validator.validate(make_request("2026-06-07", "2026-06-01"))
    assert list(result.errors) == ["end_at"]


@pytest.mark.asyncio
async def test_fourth_segment_allowed_fifth_rejected(store, validator, make_request):
    store.nurses[1].num_weeks_off = 10
    store.add_event(1, date(2026, 4, 1), date(2026, 4, 7))
    store.add_event(1, date(2026, 5, 1), date(2026, 5, 7))
    store.add_event(1, date(2026, 6, 1), date(2026, 6, 7))

    fourth = await validator.validate(make_request("2026-07-01", "2026-07-07"))
    assert "segs" not in fourth.errors
    assert fourth.errors == {}

    store.add_event(1, date(2026, 7, 1), date(2026, 7, 7))
    fifth = await validator.validate(make_request("2026-08-01", "2026-08-07", pto=True))
    assert list(fifth.errors) == ["segs"]


@pytest.mark.asyncio
async def test_segment_limit_checked_before_overlap(store, validator, make_request):
    for month in (4, 5, 6, 7):
        store.add_event(1, date(2026, month, 1), date(2026, month, 7))

    result = await validator.validate(make_request("2026-04-03", "2026-04-10"))
    assert list(result.errors) == ["segs"]


@pytest.mark.asyncio
async def test_overlap_halts_before_policies(store, validator, make_request):
    store.add_event(1, date(2026, 6, 1), date(2026, 6, 7), pto=True)

    # Would also break the PTO rule
    result = await validator.validate(make_request("2026-06-07", "2026-06-13", pto=True))
    assert result.errors == {"overlap": "Vacation weeks must not overlap"}


@pytest.mark.asyncio
async def test_adjacent_segment_does_not_overlap(store, validator, make_request):
    store.add_event(1, date(2026, 6, 1), date(2026, 6, 7))

    result = await validator.validate(make_request("2026-06-08", "2026-06-14"))
    assert result.errors == {}


@pytest.mark.asyncio
async def test_allowance_of_two_weeks(store, validator, make_request):
    store.nurses[1].num_weeks_off = 2

    first = await validator.validate(make_request("2026-05-01", "2026-05-07"))
    assert first.errors == {}

    store.add_event(1, date(2026, 5, 1), date(2026, 5, 7))
    second = await validator.validate(make_request("2026-07-01", "2026-07-08"))
    assert list(second.errors) == ["allowed"]


@pytest.mark.asyncio
async def test_full_day_reports_max_day(store, validator, make_request):
    store.add_nurse(2)
    store.add_nurse(3)
    store.add_event(2, date(2026, 9, 1), date(2026, 9, 10))
    store.add_event(3, date(2026, 9, 8), date(2026, 9, 20))

    result = await validator.validate(make_request("2026-09-02", "2026-09-09", pto=True))
    assert list(result.errors) == ["max_day"]


@pytest.mark.asyncio
async def test_rolling_month_bonus_opens_a_spot(store, validator, make_request):
    store.configure(unit_id=1, shift="day", year=2, months=[7])  # Jul, Aug, Sep
    store.add_nurse(2)
    store.add_nurse(3)
    store.add_event(2, date(2026, 9, 1), date(2026, 9, 10))
    store.add_event(3, date(2026, 9, 8), date(2026, 9, 20))

    result = await validator.validate(make_request("2026-09-02", "2026-09-09"))
    assert result.errors == {}


@pytest.mark.asyncio
async def test_other_units_and_shifts_do_not_use_capacity(store, validator, make_request):
    store.configure(unit_id=1, shift="day", year=1)
    store.add_nurse(2, shift="night")
    store.add_nurse(3, unit_id=2)
    store.add_event(2, date(2026, 9, 1), date(2026, 9, 10))
    store.add_event(3, date(2026, 9, 1), date(2026, 9, 10))

    result = await validator.validate(make_request("2026-09-02", "2026-09-09"))
    assert result.errors == {}


@pytest.mark.asyncio
async def test_unconfigured_unit_has_no_capacity(store, validator, make_request):
    store.unit_shifts.clear()

    result = await validator.validate(make_request("2026-09-02", "2026-09-09"))
    assert list(result.errors) == ["max_day"]


@pytest.mark.asyncio
async def test_capacity_loaded_with_a_single_query(store, validator, make_request):
    await validator.validate(make_request("2026-09-01", "2026-09-28"))
    assert len(store.window_queries) == 1


@pytest.mark.asyncio
async def test_holiday_pto_and_year_accumulate(store, validator, make_request):
    store.nurses[1].num_weeks_off = 52
    store.configure(unit_id=1, shift="day", year=5, holiday=1)
    store.add_nurse(2)
    store.add_event(2, date(2026, 12, 18), date(2026, 12, 26))

    result = await validator.validate(make_request("2026-12-20", "2027-03-05", pto=True))
    assert set(result.errors) == {"holiday", "pto", "year"}
    assert result.valid is False


@pytest.mark.asyncio
async def test_holiday_cap_counts_start_day_only(store, validator, make_request):
    store.configure(unit_id=1, shift="day", year=5, holiday=1)
    store.add_nurse(2)
    store.add_event(2, date(2026, 12, 28), date(2027, 1, 3))

    result = await validator.validate(make_request("2026-12-21", "2026-12-31"))
    assert result.errors == {}


@pytest.mark.asyncio
async def test_holiday_cap_ignored_outside_window(store, validator, make_request):
    store.configure(unit_id=1, shift="day", year=5, holiday=0)

    result = await validator.validate(make_request("2026-11-01", "2026-11-07"))
    assert result.errors == {}


@pytest.mark.asyncio
async def test_pto_rules(store, validator, make_request):
    long_pto = await validator.validate(make_request("2026-06-01", "2026-06-10", pto=True))
    assert long_pto.errors == {"pto": "You have selected more than one week of PTO"}

    week_pto = await validator.validate(make_request("2026-06-01", "2026-06-07", pto=True))
    assert week_pto.errors == {}

    store.add_event(1, date(2026, 4, 1), date(2026, 4, 7), pto=True)
    second_pto = await validator.validate(make_request("2026-06-01", "2026-06-07", pto=True))
    assert list(second_pto.errors) == ["pto"]


@pytest.mark.asyncio
async def test_scheduling_year(validator, make_request):
    march = await validator.validate(make_request("2026-03-01", "2026-03-07"))
    assert march.errors == {}

    into_february = await validator.validate(make_request("2027-02-20", "2027-02-28"))
    assert into_february.errors == {}

    january = await validator.validate(make_request("2026-01-05", "2026-01-11"))
    assert january.errors == {"year": "Please select a vacation for the currently scheduled year"}


@pytest.mark.asyncio
async def test_anchor_year_comes_from_store(store, validator, make_request):
    store.current_year = 2025

    result = await validator.validate(make_request("2026-01-05", "2026-01-11"))
    assert result.errors == {}


@pytest.mark.asyncio
async def test_revalidating_saved_event_ignores_itself(store, validator, make_request):
    store.nurses[1].num_weeks_off = 1
    store.configure(unit_id=1, shift="day", year=1)
    saved = store.add_event(1, date(2026, 6, 1), date(2026, 6, 7), pto=True)

    again = await validator.validate(make_request("2026-06-01", "2026-06-07", pto=True, event_id=saved.id))
    assert again.errors == {}

    as_new = await validator.validate(make_request("2026-06-01", "2026-06-07", pto=True))
    assert list(as_new.errors) == ["overlap"]


@pytest.mark.asyncio
async def test_unknown_nurse_raises(validator, make_request):
    with pytest.raises(NotFoundError):
        await validator.validate(make_request("2026-06-01", "2026-06-07", nurse_id=99))


@pytest.mark.asyncio
async def test_validator_can_be_reused(store, validator, make_request):
    store.add_nurse(2, shift="night")
    store.configure(unit_id=1, shift="night", year=0)

    day_nurse = make_request("2026-06-01", "2026-06-07")
    night_nurse = make_request("2026-06-01", "2026-06-07", nurse_id=2)

    first = await validator.validate(day_nurse)
    night = await validator.validate(night_nurse)
    second = await validator.validate(day_nurse)

    assert first.errors == second.errors == {}
    assert list(night.errors) == ["max_day"]


@pytest.mark.asyncio
async def test_timestamp_strings_are_cut_to_dates(validator, make_request):
    result = await validator.validate(make_request("2026-06-01T08:30:00", "2026-06-07T17:00:00"))
    assert result.errors == {}


@pytest.mark.asyncio
@pytest.mark.parametrize("start", [20260601, True, {"date": "2026-06-01"}])
async def test_non_string_dates_only_report_format(validator, make_request, start):
    result = await validator.validate(make_request(start, "2026-06-07"))
    assert result.errors == {"format": "Dates were not properly formatted"}
