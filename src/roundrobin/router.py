from pathlib import Path
from typing import Dict, List, Optional

from fastapi import APIRouter, Form, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field

from roundrobin import config
from roundrobin.engine import BadmintonScheduler
from roundrobin.exceptions import SchedulerError
from roundrobin.logger import setup_logger
from roundrobin.models import FairnessReport
from roundrobin.render import render_fairness_report
from roundrobin.validation import (
    clean_player_names,
    estimate_tournament_duration,
    format_player_count,
    validate_players,
    validate_tournament_config,
)

logger = setup_logger(__name__)

router = APIRouter(prefix="/roundrobin", tags=["Round Robin"])
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


# -- API models ----------------------------------------------------------------

class ScheduleRequest(BaseModel):
    player_names: str
    courts: int = Field(config.DEFAULT_COURTS, ge=1, le=config.MAX_COURTS)
    rounds: int = Field(config.DEFAULT_ROUNDS, ge=1, le=config.MAX_ROUNDS)
    print_stats: bool = config.PRINT_STATS
    clean_names: bool = False
    seed: Optional[int] = None


class CourtGame(BaseModel):
    court: int
    team1: List[str]
    team2: List[str]


class RoundOut(BaseModel):
    round: int
    resting: List[str]
    games: List[CourtGame]
    degraded: bool


class PairSummary(BaseModel):
    total: int
    repeated: int
    max_repeats: int
    repeated_pairs: List[Dict]


class CourtSummary(BaseModel):
    games: Dict[int, int]
    most_used: Optional[int]
    least_used: Optional[int]


class ScheduleResponse(BaseModel):
    schedule: str
    games_only: str
    rounds: List[RoundOut]
    partnerships: PairSummary
    oppositions: PairSummary
    courts: CourtSummary
    degraded_rounds: List[int]
    warnings: List[str]
    duration: str


# -- Helpers -------------------------------------------------------------------

def _run_scheduler(
    player_names: str,
    courts: int,
    rounds: int,
    print_stats: bool,
    seed: Optional[int],
    clean_names: bool = False,
) -> BadmintonScheduler:
    """Validate the form input and load the players into a fresh scheduler."""
    if clean_names:
        player_names = clean_player_names(player_names)
    errors = validate_players(player_names)
    if errors:
        raise HTTPException(status_code=400, detail="\n".join(errors))

    try:
        scheduler = BadmintonScheduler(
            max_courts=courts,
            max_rounds=rounds,
            print_stats=print_stats,
            seed=seed if seed is not None else config.SEED,
        )
        scheduler.load_players(player_names)
    except SchedulerError as err:
        raise HTTPException(status_code=400, detail=str(err))
    return scheduler


def _pair_summary(stats) -> PairSummary:
    return PairSummary(
        total=stats.total,
        repeated=stats.repeated,
        max_repeats=stats.max_repeats,
        repeated_pairs=[{"players": list(rp.players), "count": rp.count} for rp in stats.repeated_pairs],
    )


def _court_summary(report: FairnessReport) -> CourtSummary:
    courts = report.courts
    return CourtSummary(
        games={u.court: u.count for u in courts.all_courts},
        most_used=courts.most_used.court if courts.most_used else None,
        least_used=courts.least_used.court if courts.least_used else None,
    )


# Routes

@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return templates.TemplateResponse(request, "index.html", {
        "player_names": config.DEFAULT_PLAYERS,
        "courts": config.DEFAULT_COURTS,
        "rounds": config.DEFAULT_ROUNDS,
        "print_stats": config.PRINT_STATS,
        "max_courts": config.MAX_COURTS,
        "max_rounds": config.MAX_ROUNDS,
    })


@router.post("/schedule", response_class=HTMLResponse)
async def create_schedule(
    request: Request,
    player_names: str = Form(...),
    courts: int = Form(config.DEFAULT_COURTS),
    rounds: int = Form(config.DEFAULT_ROUNDS),
    print_stats: bool = Form(False),
    clean_names: bool = Form(False),
):
    scheduler = _run_scheduler(player_names, courts, rounds, print_stats, None, clean_names)
    schedule = scheduler.generate_schedule()
    report = scheduler.calculate_fairness_stats()

    return templates.TemplateResponse(request, "schedule.html", {
        "schedule": schedule,
        "games_only": scheduler.games_only_text(),
        "fairness": render_fairness_report(report),
        "warnings": validate_tournament_config(player_names, courts, rounds),
        "duration": estimate_tournament_duration(rounds),
        "player_count": format_player_count(len(scheduler.players)),
        "degraded_rounds": scheduler.degraded_rounds,
    })


@router.post("/api/schedule", response_model=ScheduleResponse)
async def create_schedule_api(payload: ScheduleRequest):
    scheduler = _run_scheduler(
        payload.player_names, payload.courts, payload.rounds, payload.print_stats, payload.seed, payload.clean_names,
    )
    schedule = scheduler.generate_schedule()
    report = scheduler.calculate_fairness_stats()

    rounds = [
        RoundOut(
            round=r.round,
            resting=sorted(r.resting),
            games=[CourtGame(court=a.court, team1=sorted(a.team1), team2=sorted(a.team2)) for a in r.assignments],
            degraded=r.degraded,
        )
        for r in scheduler.schedule
    ]
    return ScheduleResponse(
        schedule=schedule,
        games_only=scheduler.games_only_text(),
        rounds=rounds,
        partnerships=_pair_summary(report.partnerships),
        oppositions=_pair_summary(report.oppositions),
        courts=_court_summary(report),
        degraded_rounds=scheduler.degraded_rounds,
        warnings=validate_tournament_config(payload.player_names, payload.courts, payload.rounds),
        duration=estimate_tournament_duration(payload.rounds),
    )
