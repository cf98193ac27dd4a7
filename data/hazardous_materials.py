"""Hazardous material categories and fee schedule (RA 9514 IRR Rule 11.3)."""

from typing import List

from models.calculators import HazardousCategory, HazardousMaterial

UNITS = ["liter", "kg"]

HAZARDOUS_CATEGORIES: List[HazardousCategory] = [
    HazardousCategory("flammable-liquids", "Flammable Liquids",
                      "Liquids with flash points below 37.8°C (100°F)",
                      ("Gasoline", "Acetone", "Ethanol", "Methanol", "Toluene"), 5.75, 7.50, 500),
    HazardousCategory("combustible-liquids", "Combustible Liquids",
                      "Liquids with flash points at or above 37.8°C (100°F)",
                      ("Diesel fuel", "Kerosene", "Lubricating oils", "Cooking oils"), 4.50, 5.85, 400),
    HazardousCategory("flammable-solids", "Flammable Solids",
                      "Solids that can readily catch fire and burn vigorously",
                      ("Matches", "Activated carbon", "Sulfur", "Naphthalene"), 0, 6.25, 450),
    HazardousCategory("oxidizers", "Oxidizers and Organic Peroxides",
                      "Materials that readily yield oxygen to stimulate combustion",
                      ("Hydrogen peroxide", "Potassium permanganate", "Nitrates", "Chlorates"), 6.50, 8.25, 550),
    HazardousCategory("toxic-materials", "Toxic Materials",
                      "Materials that can cause injury or death when inhaled, ingested, or absorbed",
                      ("Pesticides", "Cyanides", "Heavy metals", "Arsenic compounds"), 7.25, 9.50, 600),
    HazardousCategory("corrosive-materials", "Corrosive Materials",
                      "Materials that can destroy living tissue or damage materials on contact",
                      ("Sulfuric acid", "Hydrochloric acid", "Sodium hydroxide", "Potassium hydroxide"),
                      6.75, 8.75, 525),
    HazardousCategory("compressed-gases", "Compressed Gases",
                      "Gases stored under pressure in cylinders or tanks",
                      ("LPG", "Acetylene", "Oxygen", "Nitrogen", "Carbon dioxide"), 3.25, 4.50, 350),
    HazardousCategory("explosives", "Explosives",
                      "Materials that can rapidly release gas and heat when subjected to shock or heat",
                      ("Dynamite", "TNT", "Blasting agents", "Fireworks", "Ammunition"), 0, 15.00, 1000),
]

HAZARDOUS_MATERIALS: List[HazardousMaterial] = [
    HazardousMaterial("gasoline", "Gasoline", "flammable-liquids", "liter", 0.75),
    HazardousMaterial("diesel", "Diesel Fuel", "combustible-liquids", "liter", 0.85),
    HazardousMaterial("kerosene", "Kerosene", "combustible-liquids", "liter", 0.82),
    HazardousMaterial("lpg", "Liquefied Petroleum Gas (LPG)", "compressed-gases", "kg"),
    HazardousMaterial("acetone", "Acetone", "flammable-liquids", "liter", 0.79),
    HazardousMaterial("ethanol", "Ethanol", "flammable-liquids", "liter", 0.79),
    HazardousMaterial("methanol", "Methanol", "flammable-liquids", "liter", 0.79),
    HazardousMaterial("toluene", "Toluene", "flammable-liquids", "liter", 0.87),
    HazardousMaterial("acetylene", "Acetylene", "compressed-gases", "kg"),
    HazardousMaterial("oxygen", "Oxygen", "compressed-gases", "kg"),
    HazardousMaterial("hydrogen-peroxide", "Hydrogen Peroxide", "oxidizers", "liter", 1.45),
    HazardousMaterial("sulfuric-acid", "Sulfuric Acid", "corrosive-materials", "liter", 1.84),
    HazardousMaterial("hydrochloric-acid", "Hydrochloric Acid", "corrosive-materials", "liter", 1.2),
    HazardousMaterial("sodium-hydroxide", "Sodium Hydroxide", "corrosive-materials", "kg"),
    HazardousMaterial("potassium-hydroxide", "Potassium Hydroxide", "corrosive-materials", "kg"),
    HazardousMaterial("pesticides", "Pesticides", "toxic-materials", "liter", 1.1),
    HazardousMaterial("matches", "Matches", "flammable-solids", "kg"),
    HazardousMaterial("sulfur", "Sulfur", "flammable-solids", "kg"),
    HazardousMaterial("naphthalene", "Naphthalene", "flammable-solids", "kg"),
    HazardousMaterial("dynamite", "Dynamite", "explosives", "kg"),
    HazardousMaterial("fireworks", "Fireworks", "explosives", "kg"),
    HazardousMaterial("ammunition", "Ammunition", "explosives", "kg"),
]
