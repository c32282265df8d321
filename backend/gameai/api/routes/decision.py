"""Behavior tree, fuzzy logic and genetic algorithm API routes."""
import random

from fastapi import APIRouter, Depends, HTTPException

from ...config import Settings
from ...models.schemas import (
    BehaviorRunRequest,
    BehaviorRunResponse,
    DesirabilityRequest,
    DesirabilityResponse,
    GeneticRunRequest,
    GeneticRunResponse,
)
from ...core.errors import SearchLimitExceeded
from ...core.behavior_tree import build_tree
from ...core.fuzzy import DefuzzifyMethod, weapon_desirability
from ...core.genetic import (
    GeneticAlgorithm,
    CrossoverMethod,
    FITNESS_FUNCTIONS,
    seed_random,
)
from ..deps import get_app_settings, get_rng

router = APIRouter(prefix="/api", tags=["decision"])


@router.post("/behavior/run", response_model=BehaviorRunResponse)
async def run_behavior_tree(
    request: BehaviorRunRequest,
    settings: Settings = Depends(get_app_settings),
    rng: random.Random = Depends(get_rng),
) -> BehaviorRunResponse:
    """
    Build a behavior tree from JSON and run it.

    Args:
        request: BehaviorRunRequest with the tree description and tick count.
        settings: Settings dependency (repeat-until-fail guard).
        rng: Random source for random selectors.

    Returns:
        BehaviorRunResponse with the root state and the execution trace.
    """
    trace = []
    try:
        root = build_tree(request.tree, rng=rng, max_iterations=settings.search_max_iterations)
        for _ in range(request.ticks):
            root(trace)
    except (ValueError, SearchLimitExceeded) as e:
        raise HTTPException(status_code=400, detail=f"Behavior tree failed: {str(e)}")

    return BehaviorRunResponse(state=root.get_state().value, trace=trace)


@router.post("/fuzzy/desirability", response_model=DesirabilityResponse)
async def fuzzy_desirability(
    request: DesirabilityRequest,
    settings: Settings = Depends(get_app_settings),
) -> DesirabilityResponse:
    """Weapon desirability from distance to target and ammo status."""
    try:
        method = DefuzzifyMethod(request.method)
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid method. Must be one of: {[m.value for m in DefuzzifyMethod]}",
        )

    value = weapon_desirability(
        request.distance,
        request.ammo,
        method=method,
        num_samples=settings.fuzzy_num_samples,
    )
    return DesirabilityResponse(desirability=value, method=method.value)


@router.post("/genetic/run", response_model=GeneticRunResponse)
async def run_genetic(
    request: GeneticRunRequest,
    settings: Settings = Depends(get_app_settings),
    rng: random.Random = Depends(get_rng),
) -> GeneticRunResponse:
    """
    Evolve a population until the target fitness or the generation limit.

    Args:
        request: GeneticRunRequest with problem and GA parameters.
        settings: Settings dependency (default target and generation limit).
        rng: Random source, replaced by a seeded one when request.seed is set.

    Returns:
        GeneticRunResponse with the fittest chromosome.
    """
    fitness_fn = FITNESS_FUNCTIONS.get(request.fitness)
    if fitness_fn is None:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid fitness. Must be one of: {list(FITNESS_FUNCTIONS)}",
        )
    try:
        method = CrossoverMethod(request.crossover)
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid crossover. Must be one of: {[m.value for m in CrossoverMethod]}",
        )

    if request.seed is not None:
        rng = random.Random(request.seed)

    ga = GeneticAlgorithm(
        chromosome_size=request.chromosome_size,
        fitness_fn=fitness_fn,
        seeder=seed_random(request.gene_max),
        rng=rng,
        target_fitness=(
            request.target_fitness if request.target_fitness is not None else settings.ga_target_fitness
        ),
        max_generations=(
            request.max_generations if request.max_generations is not None else settings.ga_max_generations
        ),
    )
    result = ga.run(
        population_size=request.population_size,
        mutation_probability=request.mutation_probability,
        method=method,
    )
    return GeneticRunResponse(**result.to_dict())
