import numbers

from plotcov.utils.options import process_options


class EllipseOptions:
    """Settings of a covariance ellipse plus the style passed on to matplotlib."""

    defaults = ('conf', 0.9, 'num_pts', 100)

    def __init__(self, conf=0.9, num_pts=100, style=None):
        if not isinstance(num_pts, numbers.Integral) or num_pts < 1:
            raise ValueError(
                'num_pts must be a positive integer, got {}'.format(num_pts)
            )
        if not 0.0 <= conf <= 1.0:
            raise ValueError(
                'conf must be a confidence between 0 and 1, got {}'.format(conf)
            )

        self.conf = conf
        self.num_pts = num_pts
        self.style = dict(style) if style else {}

    @classmethod
    def from_kwargs(cls, kwargs):
        values, style = process_options(kwargs, cls.defaults)
        return cls(values['conf'], values['num_pts'], style)

    def __repr__(self):
        return 'EllipseOptions(conf={}, num_pts={}, style={})'.format(
            self.conf, self.num_pts, self.style
        )
