"""Genetic algorithm over fixed-length integer chromosomes.

Roulette-wheel selection, single-point crossover between consecutive pairs
and single-gene random mutation. The search stops when the fittest
individual reaches the target fitness or the generation limit is passed.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from itertools import combinations
from typing import Callable, Dict, List, Optional, Sequence

logger = logging.getLogger(__name__)

Seeder = Callable[[int, random.Random], int]
FitnessFn = Callable[[Sequence["Gene"]], int]


def seed_identity(p: int = 0, rng: Optional[random.Random] = None) -> int:
    """Gene value equals the seeding parameter."""
    return p


def seed_value(value: int) -> Seeder:
    """Seeder that always returns value."""
    def seeder(p: int = 0, rng: Optional[random.Random] = None) -> int:
        return value
    return seeder


def seed_random(maximum: int) -> Seeder:
    """Seeder returning a random value in [0, maximum)."""
    if maximum < 1:
        raise ValueError("Random seeder needs a positive maximum")

    def seeder(p: int = 0, rng: Optional[random.Random] = None) -> int:
        return (rng or random).randrange(maximum)
    return seeder


class Gene:
    """A single integer gene."""

    __slots__ = ("value",)

    def __init__(self, value: int = 0):
        self.value = value

    def get_value(self) -> int:
        return self.value

    def set_value(self, value: int) -> None:
        self.value = value

    def __eq__(self, other) -> bool:
        return isinstance(other, Gene) and self.value == other.value

    def __repr__(self) -> str:
        return f"Gene({self.value})"

    def __str__(self) -> str:
        return str(self.value)


# Fitness functions return an int; 100 means a perfect chromosome.

def fitness_accumulate(genes: Sequence[Gene]) -> int:
    """Sum of all gene values."""
    return sum(gene.get_value() for gene in genes)


def fitness_nbits(genes: Sequence[Gene]) -> int:
    """Percentage of genes equal to 1."""
    if not genes:
        return 0
    ones = sum(1 for gene in genes if gene.get_value() == 1)
    return int(ones / len(genes) * 100)


def fitness_8queens(genes: Sequence[Gene]) -> int:
    """Percentage of queen pairs that do not attack each other.

    Gene i is the row of the queen standing in column i.
    """
    pairs = list(combinations(range(len(genes)), 2))
    if not pairs:
        return 100
    safe = 0
    for a, b in pairs:
        ra, rb = genes[a].get_value(), genes[b].get_value()
        if ra != rb and abs(ra - rb) != b - a:
            safe += 1
    return int(safe / len(pairs) * 100)


FITNESS_FUNCTIONS: Dict[str, FitnessFn] = {
    "accumulate": fitness_accumulate,
    "nbits": fitness_nbits,
    "8queens": fitness_8queens,
}


class CrossoverMethod(str, Enum):
    """Crossover point selection."""
    MIDDLE = "middle"
    RANDOM = "random"


class Chromosome:
    """Genes plus a cached fitness that is refreshed on every change."""

    def __init__(self, genes: List[Gene], fitness_fn: FitnessFn):
        self.genes = genes
        self.fitness_fn = fitness_fn
        self.fitness = fitness_fn(genes)

    @property
    def size(self) -> int:
        return len(self.genes)

    def get_genes(self) -> List[Gene]:
        return self.genes

    def set_genes(self, genes: Sequence[Gene]) -> None:
        self.genes = [Gene(g.get_value()) for g in genes]
        self.fitness = self.fitness_fn(self.genes)

    def get_gene(self, i: int) -> Gene:
        return self.genes[i]

    def set_gene(self, i: int, gene: Gene) -> None:
        self.genes[i] = Gene(gene.get_value())
        self.fitness = self.fitness_fn(self.genes)

    def get_fitness(self) -> int:
        return self.fitness

    def random_mutation(self, rng: random.Random, seeder: Seeder) -> None:
        """Replace the gene at a random point with a freshly seeded one."""
        self.set_gene(rng.randrange(self.size), Gene(seeder(0, rng)))

    def copy_genes_from(self, src: "Chromosome") -> None:
        self.set_genes(src.genes)

    def values(self) -> List[int]:
        return [gene.get_value() for gene in self.genes]

    def __str__(self) -> str:
        return "[" + ",".join(str(g) for g in self.genes) + f"]={self.fitness}"


class Individual:
    """Member of a population; owns one chromosome."""

    def __init__(self, chromosome: Chromosome):
        self.chromosome = chromosome

    def get_chromosome(self) -> Chromosome:
        return self.chromosome

    def get_genes(self) -> List[Gene]:
        return self.chromosome.get_genes()

    def get_gene(self, i: int) -> Gene:
        return self.chromosome.get_gene(i)

    def set_gene(self, i: int, gene: Gene) -> None:
        self.chromosome.set_gene(i, gene)

    def copy_genes_from(self, other: "Individual") -> None:
        self.chromosome.copy_genes_from(other.chromosome)

    def get_fitness(self) -> int:
        return self.chromosome.get_fitness()

    def __str__(self) -> str:
        return str(self.chromosome)


class Population:
    """Fixed-size list of individuals with the fittest one tracked."""

    def __init__(self, size: int, factory: Callable[[], Individual]):
        self.individuals: List[Individual] = [factory() for _ in range(size)]
        self.fittest: Optional[Individual] = None
        self.update_fittest()

    def get_size(self) -> int:
        return len(self.individuals)

    def get_individual(self, i: int) -> Individual:
        return self.individuals[i]

    def get_fittest(self) -> Optional[Individual]:
        return self.fittest

    def total_fitness(self) -> int:
        return sum(ind.get_fitness() for ind in self.individuals)

    def update_fittest(self) -> None:
        """Keep the first individual with the highest fitness."""
        self.fittest = None
        for individual in self.individuals:
            if self.fittest is None or individual.get_fitness() > self.fittest.get_fitness():
                self.fittest = individual

    def __str__(self) -> str:
        best = self.fittest.get_fitness() if self.fittest else None
        lines = [f" = {best}"]
        lines.extend(f"  {i}:{ind}" for i, ind in enumerate(self.individuals))
        return "\n".join(lines) + "\n"


@dataclass
class GeneticResult:
    """Outcome of a run."""
    fittest: Individual
    generation: int
    solved: bool
    history: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "genes": self.fittest.get_chromosome().values(),
            "fitness": self.fittest.get_fitness(),
            "generation": self.generation,
            "solved": self.solved,
            "history": self.history,
        }


class GeneticAlgorithm:
    """Generational GA driver."""

    def __init__(
        self,
        chromosome_size: int,
        fitness_fn: FitnessFn,
        seeder: Seeder = seed_identity,
        rng: Optional[random.Random] = None,
        target_fitness: int = 100,
        max_generations: int = 10000,
    ):
        if chromosome_size < 1:
            raise ValueError("Chromosome size must be positive")
        self.chromosome_size = chromosome_size
        self.fitness_fn = fitness_fn
        self.seeder = seeder
        self._rng = rng or random.Random()
        self.target_fitness = target_fitness
        self.max_generations = max_generations
        self.population: Optional[Population] = None
        self.generation = 0
        self.history: List[int] = []

    def new_individual(self) -> Individual:
        genes = [Gene(self.seeder(0, self._rng)) for _ in range(self.chromosome_size)]
        return Individual(Chromosome(genes, self.fitness_fn))

    def new_population(self, size: int) -> Population:
        return Population(size, self.new_individual)

    def get_fittest(self) -> Optional[Individual]:
        return self.population.get_fittest() if self.population else None

    def set_population(self, generation: Population) -> None:
        """Replace the current population with a new generation."""
        self.population = generation
        self.population.update_fittest()

    def selection(self, size: int) -> Population:
        """Roulette wheel: selection probability is proportional to fitness."""
        if self.population is None:
            self.set_population(self.new_population(size))
        new_generation = self.new_population(size)
        current = self.population
        total = current.total_fitness()

        for i in range(size):
            if total <= 0:
                chosen = self._rng.randrange(current.get_size())
            else:
                rnd = self._rng.randrange(total)
                chosen = 0
                for chosen in range(current.get_size()):
                    rnd -= current.get_individual(chosen).get_fitness()
                    if rnd <= 0:
                        break
            new_generation.get_individual(i).copy_genes_from(current.get_individual(chosen))
        return new_generation

    def crossover(self, generation: Population, method: CrossoverMethod) -> None:
        """Swap the genes before the crossover point within pairs (0,1), (2,3), ..."""
        size = self.chromosome_size
        if CrossoverMethod(method) == CrossoverMethod.MIDDLE:
            point = size // 2
        else:
            point = self._rng.randrange(size) // 2

        for j in range(0, generation.get_size() - 1, 2):
            first = generation.get_individual(j)
            second = generation.get_individual(j + 1)
            for i in range(point):
                gene = second.get_gene(i)
                second.set_gene(i, first.get_gene(i))
                first.set_gene(i, gene)

    def mutation(self, generation: Population, probability: int) -> None:
        """Each individual mutates one gene with the given percent probability."""
        for individual in generation.individuals:
            if self._rng.randrange(100) < probability:
                individual.get_chromosome().random_mutation(self._rng, self.seeder)

    def next(self, mutation_probability: int, method: CrossoverMethod) -> bool:
        """Breed one generation; False once the search should stop."""
        fittest = self.population.get_fittest()
        self.history.append(fittest.get_fitness())
        logger.debug("Generation %d: %s", self.generation, fittest)

        if fittest.get_fitness() >= self.target_fitness or self.generation > self.max_generations:
            return False

        new_generation = self.selection(self.population.get_size())
        self.crossover(new_generation, method)
        self.mutation(new_generation, mutation_probability)
        self.set_population(new_generation)
        self.generation += 1
        return True

    def run(
        self,
        population_size: int = 100,
        mutation_probability: int = 70,
        method: CrossoverMethod = CrossoverMethod.MIDDLE,
    ) -> GeneticResult:
        """
        Evolve a fresh population until solved or out of generations.

        Args:
            population_size: Individuals per generation.
            mutation_probability: Percent chance that an individual mutates.
            method: Crossover point selection.

        Returns:
            GeneticResult with the fittest individual found.
        """
        if population_size < 1:
            raise ValueError("Population size must be positive")
        self.generation = 0
        self.history = []
        self.set_population(self.new_population(population_size))

        while self.next(mutation_probability, method):
            pass

        fittest = self.get_fittest()
        solved = fittest.get_fitness() >= self.target_fitness
        logger.info(
            "GA finished at generation %d, best fitness %d (solved=%s)",
            self.generation, fittest.get_fitness(), solved,
        )
        return GeneticResult(fittest, self.generation, solved, list(self.history))
