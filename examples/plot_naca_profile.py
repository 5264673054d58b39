import matplotlib.pyplot as plt

from foilview.naca import generate_profile, max_thickness
from foilview.params import FoilParams


def main() -> None:
    params = FoilParams(camber=0.02, thickness=0.12, chord=1.0, resolution=200)
    profile = generate_profile(params)

    print(f"{profile.designation}: {len(profile)} points")
    print(f"max thickness (sampled) = {profile.max_thickness:.6f}")
    print(f"max thickness (exact)   = {max_thickness(params):.6f}")
    print(f"area = {profile.area:.6f}, centroid = {profile.centroid}")

    profile.plot()
    plt.show()


if __name__ == "__main__":
    main()
