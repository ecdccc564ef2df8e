"""
sofajax implements the IAU SOFA celestial-to-terrestrial transformation core in JAX.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from .config import set_dtype, get_dtype, get_matrix_tolerance
from .errors import SofaError, IllegalParameterError, InternalError

from .constants import (
    DJ00,
    DJC,
    DJM0,
    DJM00,
    DAS2R,
    DMAS2R,
    U2R,
    D2PI,
    TURNAS,
)

from .rotations import Rx, Ry, Rz
from .utils import anp, anpm

from ._types import (
    BiasPrecession,
    CIPCoordinates,
    CIPLocator,
    EulerAngles,
    FrameBias,
    FundamentalArguments,
    FWAngles,
    NutationAngles,
    PrecessionAngles,
    PrecessionNutation,
    PrecessionNutationModel,
    PrecessionRates,
    TransformMethod,
)

from .fundamental_arguments import (
    fal03,
    falp03,
    faf03,
    fad03,
    faom03,
    fame03,
    fave03,
    fae03,
    fama03,
    faju03,
    fasa03,
    faur03,
    fane03,
    fapa03,
    fundamental_arguments,
)

from .nutation import nut00a, nut00b, nut06a, nut80, nutm80, numat, nutation

from .precession import (
    obl80,
    obl06,
    bi00,
    pr00,
    bp00,
    pmat00,
    pfw06,
    fw2m,
    fw2xy,
    pmat06,
    bp06,
    pb06,
    p06e,
    prec76,
    pmat76,
)

from .precession_nutation import (
    pn00,
    pn00a,
    pn00b,
    pnm00a,
    pnm00b,
    num00a,
    num00b,
    pn06,
    pn06a,
    pnm06a,
    num06a,
    pnm80,
    bpn2xy,
    xy06,
    bias_precession_nutation,
)

from .cio import (
    s00,
    s06,
    s00a,
    s00b,
    s06a,
    xys00a,
    xys00b,
    xys06a,
    c2ixys,
    c2ixy,
    c2ibpn,
    c2i00a,
    c2i00b,
    c2i06a,
    celestial_to_intermediate,
)

from .earth_rotation import (
    era00,
    gmst00,
    gmst06,
    eect00,
    ee00,
    ee00a,
    ee00b,
    ee06a,
    eors,
    eo06a,
    gst00a,
    gst00b,
    gst06,
    gst06a,
    gmst82,
    eqeq94,
    gst94,
)

from .polar_motion import sp00, pom00

from .terrestrial import (
    TransformConfig,
    c2tcio,
    c2teqx,
    c2t00a,
    c2t00b,
    c2t06a,
    c2tpe,
    c2txy,
    celestial_to_terrestrial,
)
