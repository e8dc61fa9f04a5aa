import numpy as np

# define rk schemes
def rk_scheme(rk):
    """
    Explicit Butcher tableaux with integer weights.

    The weights b are returned unnormalised together with their common
    divisor, so the update reads y0 + h / scale * sum_j(b_j * K_j).

    Returns:
        A, b, c, scale
    """
    if rk == 4: # Classical explicit RK4 (order 4)
        A = [
            [0, 0, 0, 0],
            [1/2, 0, 0, 0],
            [0, 1/2, 0, 0],
            [0, 0, 1, 0]
        ]
        b = [1, 2, 2, 1]
        c = [0, 1/2, 1/2, 1]
        scale = 6
    elif rk == 1: # Euler
        A = [[0]]
        b = [1]
        c = [0]
        scale = 1
    else:
        raise ValueError(f"No explicit scheme of order {rk}.")
    return A, b, c, scale

class RungeKuttaMethod:
    """
    A general-purpose explicit Runge-Kutta solver.

    This class is initialized with a Butcher tableau (A, b, c) and can
    perform time steps for any first-order ODE dy/dt = F(t, y).
    """

    def __init__(self, A, b, c, scale=1):
        """
        Initializes the solver with a given Butcher tableau.

        Args:
            A (list or np.array): The A matrix (s x s) of the tableau.
            b (list or np.array): The b vector (s,) of weights.
            c (list or np.array): The c vector (s,) of nodes.
            scale (float): Common divisor of the weights b.
        """
        self.A = np.array(A, dtype=float)
        self.b = np.array(b, dtype=float)
        self.c = np.array(c, dtype=float)
        self.scale = float(scale)

        num_stages = len(b)
        if (self.A.shape != (num_stages, num_stages) or
            len(c) != num_stages):
            raise ValueError("Inconsistent dimensions for A, b, and c.")
        if self.scale == 0:
            raise ValueError("Weight divisor must be non-zero.")

        self.stage = num_stages

        if not self._is_explicit():
            raise ValueError("Only explicit methods are implemented.")

    def _is_explicit(self):
        """Strictly lower-triangular A (zeros on and above diagonal)."""
        s = self.stage
        for i in range(s):
            for j in range(i, s): # Start from j=i (the diagonal)
                if not np.isclose(self.A[i, j], 0):
                    return False
        return True

    def step(self, F, y0, h, t, node_step=None):
        """
        Performs a single time step of the Runge-Kutta method.

        Stage solution:   y_j = y_0 + h * sum_l(a_jl * K_l)
        Stage derivative: K_j = F(t + node_step * c_j, y_j)
        Final solution:   y_1 = y_0 + h / scale * sum_j(b_j * K_j)

        Args:
            F (callable): The right-hand side F(t, y).
            y0 (float): The solution at the current time.
            h (float): The step size used for the weights.
            t (float): The abscissa the stages are placed around.
            node_step (float): Spacing of the stage abscissae, defaults to h.

        Returns:
            float: The solution after the step.
        """
        if node_step is None:
            node_step = h

        K_stages = [0.0] * self.stage
        for j in range(self.stage):
            # compute sum_term = sum_{l=0}^{j-1} A[j,l] * K_stages[l]
            sum_term = 0.0
            for l in range(j):  # only sum previous stages
                sum_term += self.A[j, l] * K_stages[l]

            # stage solution
            y_j = y0 + h * sum_term

            K_stages[j] = F(t + node_step * self.c[j], y_j)

        # final solution: y1 = y0 + h / scale * sum_j b[j] * K_stages[j]
        final_sum_term = 0.0
        for j in range(self.stage):
            final_sum_term += self.b[j] * K_stages[j]

        return y0 + h / self.scale * final_sum_term
