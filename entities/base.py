from typing import Optional

from components.body.component import BodyComponent
from components.movement.component import MovementComponent


class Entity:
    def __init__(self):
        self.body_component: Optional[BodyComponent] = None
        self.movement_component: Optional[MovementComponent] = None
