# ecosim

A small ecosystem simulator drawn in a pygame window. Herbivores (blue),
carnivores (red) and plants (green) live, age, lose energy, reproduce and die.
Green squares are food sources.

Every creature has an energy level and a maximum age. Animals wander in a
random direction that changes now and then, and moving costs energy; plants
stay put and slowly gain energy. A creature whose energy is above 80 % of its
maximum and whose age is above 20 may, by chance, produce a smaller offspring
with less energy, paying part of its own energy for it. Creatures that run out
of energy or reach their maximum age are removed. New plants sprout at random
now and then. A creature low on energy is drawn in red, and animals show a
small green energy bar above them.

## Installation

```
pip install .
```

## Running

```
ecosim
```

This opens a 1200×600 window, populates it with 20 herbivores, 5 carnivores,
30 plants and 20 food sources, then runs the simulation. Population statistics
(herbivores, carnivores, plants, births, deaths) are logged to the console
about every two simulated seconds. If the window cannot be opened, an error is
printed and the command exits with a non-zero status.

`ecosim --help` shows the (option-free) usage.

### Controls

| Key        | Action                                  |
|------------|-----------------------------------------|
| Space      | Pause / resume                          |
| R          | Reset the simulation                    |
| F          | Add 10 food sources (at most 100 in all)|
| Up / Down  | Speed the simulation up / down by 1.5×  |
| Escape     | Quit                                    |

## Using it as a library

The simulation core needs no window:

```python
import random

from ecosim.ecosystem import Ecosystem

world = Ecosystem(800.0, 600.0, 500, random.Random(42))
world.initialize(10, 3, 15)
for _ in range(100):
    world.update(0.016)

stats = world.statistics
print(stats.total_herbivores, stats.total_carnivores, stats.total_plants)
print(stats.births_today, stats.deaths_today)
```

- `ecosim.ecosystem.Ecosystem` holds the entities and food. Besides
  `initialize` and `update` it offers `spawn_food`, `add_food`, `add_entity`,
  `entity_count`, `food_count`, `entities`, `food_sources`, `day_cycle`,
  `statistics` (a `Statistics` snapshot) and `render(surface)`.
- `ecosim.entity.Entity` is a single creature or plant of an `EntityType`
  (`HERBIVORE`, `CARNIVORE`, `PLANT`). Pass your own `random.Random` to make
  its behaviour reproducible.
- `ecosim.structs` provides `Vector2D`, `Color` and `Food`.
- `ecosim.window.Window` wraps the pygame display (it is also a context
  manager) and raises `WindowError` when the display cannot be opened.
- `ecosim.engine.GameEngine` ties an ecosystem to a window and runs the loop.

## What it does not do

- Food sources are only scattered and drawn: no creature seeks or eats them,
  and carnivores do not hunt herbivores. Only plants gain energy.
- Creatures are not kept inside the window and may wander off-screen.
- There is no on-screen text or statistics display; statistics go to the
  console log only.
- Nothing is saved; each run starts from a fresh random world.

## Tests

```
pip install .[test]
pytest
```