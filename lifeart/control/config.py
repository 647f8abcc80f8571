DEFAULTS = dict(
    canvas=dict(width=900, height=900, resizable=False, screenRatio=0.8),
    system=dict(seed=None, fps=60, trailAlpha=25),
    texture=dict(
        mode="scatter", dots=10000, lines=50, lineSpan=100.0,
        dotMin=0.5, dotMax=2.0, alphaMin=5.0, alphaMax=15.0,
        gridStep=3, gridDensity=0.12,
    ),
    blob=dict(
        count=60, radiusMax=120.0, speedMin=0.003, speedMax=0.01,
        dotSpeedMin=0.005, dotSpeedMax=0.02, noiseStep=0.01,
        pulseAmp=15.0, driftSpeed=0.5, glowDepth=0.7,
    ),
    radiant=dict(
        count=25, motion=True, jitter=True, drift=True,
        radiusMin=10.0, radiusMax=50.0, raysMin=20, raysMax=100,
        lengthMin=15.0, lengthMax=40.0, rotMin=0.001, rotMax=0.02,
    ),
    hole=dict(
        count=20, motion=True, radiusMin=5.0, radiusMax=10.0,
        innerMin=0.3, innerMax=0.7, driftSpeed=0.05, noiseStep=0.005,
    ),
    spark=dict(
        count=200, lineChance=0.3, lifeMin=100.0, lifeMax=500.0,
        sizeMin=1.0, sizeMax=3.0, maxSpeed=1.0, steer=0.05,
    ),
)

# Partial overrides merged over DEFAULTS.
VARIANTS = {
    "fixed-700": dict(
        canvas=dict(width=700, height=700, resizable=False),
        blob=dict(count=40),
        radiant=dict(motion=False, jitter=False, drift=False),
        hole=dict(motion=False),
    ),
    "fixed-900": dict(
        canvas=dict(width=900, height=900, resizable=False),
        blob=dict(count=50),
    ),
    "responsive": dict(
        canvas=dict(width=None, height=None, resizable=True),
        blob=dict(count=60),
    ),
}

DEFAULT_VARIANT = "responsive"
