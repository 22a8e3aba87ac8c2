# campus_nav/app/wiring.py
from campus_nav.app.controllers.tour import TourHandler
from campus_nav.app.events import TourStep
from campus_nav.sim.kernel import Kernel


def wire(kernel: Kernel, *, tour: TourHandler) -> None:
    k = kernel

    # tour steps re-schedule themselves; TourFinished is observability only
    k.on(TourStep, tour.on_tour_step)
