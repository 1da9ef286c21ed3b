import numpy as np

from supershape.gameobjects.transform import normal_matrix, rotate_y

ROTATION_STEP = 0.01


class TransformState:
    def __init__(self, base_model_mat, rotate=1.0):
        """
        Frame-varying transforms, owned by a single :class:`RenderLoop`.

        :param base_model_mat: Fixed model orientation the spin is applied on top of
        :param rotate: Current spin angle about Y, in radians
        """
        self.base_model_mat = np.asarray(base_model_mat, dtype=np.float32)
        self.rotate = float(rotate)
        self.model_mat = rotate_y(self.base_model_mat, self.rotate)
        self.normal_mat = normal_matrix(self.model_mat)


class CancellationToken:
    """Stops a running :class:`RenderLoop` before its next tick."""

    def __init__(self):
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self):
        self._cancelled = True


class RenderLoop:
    def __init__(self, renderer, state: TransformState | None = None, rotation_step=ROTATION_STEP):
        """
        :param renderer: Anything with ``draw_frame(model_mat, normal_mat)`` and ``base_model``
        :param state: Transform state, built from ``renderer.base_model`` when omitted
        :param rotation_step: Angle added every tick (not scaled by frame time)
        """
        self.renderer = renderer
        self.state = state if state is not None else TransformState(renderer.base_model)
        self.rotation_step = rotation_step
        self.ticks = 0

    def step(self) -> TransformState:
        """Advance the spin by one tick and draw it."""
        state = self.state
        state.rotate += self.rotation_step
        state.model_mat = rotate_y(state.base_model_mat, state.rotate)
        state.normal_mat = normal_matrix(state.model_mat)

        self.renderer.draw_frame(state.model_mat, state.normal_mat)
        self.ticks += 1
        return state

    def run(self, token: CancellationToken | None = None, schedule=None, max_ticks=None) -> int:
        """
        Tick until ``token`` is cancelled or ``max_ticks`` ticks have run.

        :param token: Checked once before every tick; without one the loop never stops on its own
        :param schedule: Called after every tick to hand the frame back to the host
            (buffer swap, event pump, frame pacing)
        :param max_ticks: Optional upper bound on the number of ticks
        :return: Number of ticks run by this call
        """
        if token is None:
            token = CancellationToken()

        count = 0
        while not token.cancelled:
            if max_ticks is not None and count >= max_ticks:
                break
            self.step()
            count += 1
            if schedule is not None:
                schedule()
        return count
