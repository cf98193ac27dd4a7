"""Fire safety requirement catalog (RA 9514 IRR 2019, Rule 10 and related rules).

Entries are ordered for display only. Each id appears once. Text generators
are pure functions of RequirementParams.
"""

import math
from typing import Tuple

from config.defaults import EXTINGUISHER_COVERAGE_M2, GPM_TO_LPM
from engine.pump import calculate_pump_flow_rate, calculate_pump_pressure
from models.requirement import (
    FireSafetyRequirement, RequirementParams, SpecificRequirements, Thresholds,
)


# --- Text generators ---

def _sprinkler_specifications(p: RequirementParams) -> str:
    pump_psi = calculate_pump_pressure(p.building_height)
    head_type = "Standard response" if p.occupant_load > 1000 else "Quick response"
    text = (
        f"Fire pump minimum pressure: {pump_psi} PSI. Water supply duration: minimum 30-60 minutes "
        f"depending on hazard classification. Sprinkler heads: {head_type} type for light hazard; "
        f"Standard response for ordinary and high hazard occupancies."
    )
    if p.occupancy_type is not None and p.occupancy_type.hazard_classification:
        text += f" Design basis for this occupancy: {p.occupancy_type.hazard_classification} hazard."
    return text


def _alternative_system_specifications(p: RequirementParams) -> str:
    if p.occupant_load > 300:
        system = "Clean agent system with automatic detection and manual activation capability"
    else:
        system = "Dry chemical, wet chemical, or clean agent system"
    return f"{system} appropriate for the specific hazard being protected."


def _extinguisher_quantity(p: RequirementParams) -> str:
    count = math.ceil(p.floor_area / EXTINGUISHER_COVERAGE_M2)
    return f"Minimum {count} fire extinguisher(s) required for the building"


_EXTINGUISHER_RATINGS = {
    "light": "2-A:10-B:C",
    "ordinary": "4-A:40-B:C",
    "high": "6-A:80-B:C",
}


def _extinguisher_specifications(p: RequirementParams) -> str:
    text = (
        "Minimum rating of 2-A:10-B:C for light hazard occupancies; 4-A:40-B:C for ordinary hazard; "
        "6-A:80-B:C for high hazard"
    )
    hazard = p.occupancy_type.hazard_classification if p.occupancy_type else None
    if hazard in _EXTINGUISHER_RATINGS:
        text += f". This occupancy ({hazard} hazard) requires at least {_EXTINGUISHER_RATINGS[hazard]}"
    return text


def _alarm_specifications(p: RequirementParams) -> str:
    if p.occupant_load > 300 or p.stories > 3:
        system = "Addressable fire alarm system"
    else:
        system = "Conventional fire alarm system"
    return f"{system} with manual pull stations, smoke detectors, heat detectors, and audio-visual alarm devices"


def required_exit_count(occupant_load: int) -> int:
    if occupant_load > 1000:
        return 4
    if occupant_load > 500:
        return 3
    if occupant_load > 50:
        return 2
    return 1


def _exit_widths(occupant_load: int) -> Tuple[str, str]:
    door = max(0.81, math.ceil(occupant_load * 3.3) / 1000)
    stair = max(1.12, math.ceil(occupant_load * 5) / 1000)
    return f"{door:.2f}", f"{stair:.2f}"


def _exit_quantity(p: RequirementParams) -> str:
    return f"Minimum {required_exit_count(p.occupant_load)} exit(s) required"


def _exit_specifications(p: RequirementParams) -> str:
    door, stair = _exit_widths(p.occupant_load)
    return f"Minimum exit door width: {door} meters. Minimum stair width: {stair} meters."


def _standpipe_specifications(p: RequirementParams) -> str:
    if p.building_height > 30:
        standpipe_class, size = "Class I and Class III", "150 mm (6 inches)"
    else:
        standpipe_class, size = "Class I", "100 mm (4 inches)"
    return (
        f"{standpipe_class} standpipe system with {size} risers. Minimum flow rate of 500 GPM (1,893 LPM) "
        f"for the first standpipe and 250 GPM (946 LPM) for each additional standpipe, up to a maximum "
        f"of 1,250 GPM (4,731 LPM)."
    )


def _wet_standpipe_specifications(p: RequirementParams) -> str:
    pressure = calculate_pump_pressure(p.building_height)
    return (
        f"Wet standpipe system with automatic fire pump rated at minimum {pressure} PSI. System must "
        f"maintain a minimum residual pressure of 65 PSI (4.5 bar) at the topmost hose connection when "
        f"flowing 500 GPM (1,893 LPM)."
    )


def _fire_pump_specifications(p: RequirementParams) -> str:
    # Catalog text sizes on height alone; the pump calculator adds the large-load increment.
    capacity = calculate_pump_flow_rate(p.building_height, 0)
    pressure = calculate_pump_pressure(p.building_height)
    return (
        f"Fire pump with minimum capacity of {capacity} GPM ({capacity * GPM_TO_LPM:,.1f} LPM) at "
        f"{pressure} PSI. Electric fire pump with backup diesel generator or separate diesel fire pump required."
    )


def required_hydrant_count(floor_area: float) -> int:
    if floor_area > 10000:
        return 3
    if floor_area > 5000:
        return 2
    return 1


def _hydrant_quantity(p: RequirementParams) -> str:
    return f"Minimum {required_hydrant_count(p.floor_area)} fire hydrant(s) required"


def _smoke_control_specifications(p: RequirementParams) -> str:
    if p.building_height > 30:
        system = "Pressurized stairwells and mechanical smoke control system"
    else:
        system = "Mechanical smoke control system"
    return (
        f"{system} with smoke detectors, dampers, and fans. System must maintain a pressure differential "
        f"of at least 0.05 inches of water (12.5 Pa) across smoke barriers."
    )


def _fire_resistance_specifications(p: RequirementParams) -> str:
    frame = bearing = floor = roof = exterior = "1 hour"
    if p.stories >= 5:
        frame = bearing = floor = "2 hours"
    if p.stories >= 10:
        frame = bearing = "3 hours"
        floor = exterior = "2 hours"
    return (
        f"Structural frame: {frame}. Bearing walls: {bearing}. Floor construction: {floor}. "
        f"Roof construction: {roof}. Exterior walls: {exterior}."
    )


def _egress_specifications(p: RequirementParams) -> str:
    door, stair = _exit_widths(p.occupant_load)
    return (
        "Maximum travel distance: 60 meters (200 feet) for unsprinklered buildings; 90 meters (300 feet) "
        f"for sprinklered buildings. Minimum exit door width: {door} meters. Minimum stair width: {stair} meters."
    )


ALL = ("all",)

FIRE_SAFETY_REQUIREMENTS: Tuple[FireSafetyRequirement, ...] = (
    FireSafetyRequirement(
        requirement_id="automatic-sprinkler-system",
        name="Automatic Sprinkler System",
        description=(
            "An automatic sprinkler system shall be installed in buildings with a height of more than "
            "15 meters (50 feet), five or more storeys, a total floor area of more than 2,000 square "
            "meters, or an occupant load of more than 500 persons."
        ),
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 10.2.6.4",
        thresholds=Thresholds(occupant_load=500, stories=5, floor_area=2000, building_height=15),
        specific_requirements=SpecificRequirements(
            specifications=_sprinkler_specifications,
            type="Wet pipe system with water under pressure at all times. Dry pipe systems allowed only in "
                 "areas subject to freezing",
            distribution="Light hazard: One sprinkler per 20.9 sq m (225 sq ft); Ordinary hazard: One sprinkler "
                         "per 12.1 sq m (130 sq ft); High hazard: One sprinkler per 9.3 sq m (100 sq ft)",
            installation="Sprinkler heads must be installed in accordance with NFPA 13 or equivalent standards. "
                         "Maximum distance between sprinklers: 4.6 meters (15 feet) for light hazard; 4.0 meters "
                         "(13 feet) for ordinary hazard; 3.7 meters (12 feet) for high hazard",
            maintenance="Weekly visual inspection of control valves; Monthly inspection of water flow alarm "
                        "devices; Quarterly inspection of alarm devices; Annual inspection and testing of all "
                        "components; Five-year internal inspection of piping",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="alternative-automatic-fire-extinguishing-system",
        name="Alternative Automatic Fire Extinguishing System",
        description=(
            "Alternative automatic fire extinguishing systems shall be installed in areas where water-based "
            "systems are not suitable, such as commercial kitchens, computer rooms, and areas with flammable "
            "liquids."
        ),
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 10.2.6.6",
        specific_requirements=SpecificRequirements(
            specifications=_alternative_system_specifications,
            type="Commercial kitchen: Wet chemical system; Computer rooms: Clean agent system; Flammable liquid "
                 "areas: Dry chemical or foam system",
            distribution="System coverage must be designed for the specific hazard and area being protected",
            installation="Systems must be installed in accordance with applicable NFPA standards or equivalent. "
                         "Automatic detection devices must be provided",
            maintenance="Semi-annual inspection of all components; Annual testing of system operation; Recharge "
                        "or replacement as required by manufacturer specifications",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="fire-extinguishers",
        name="Portable Fire Extinguishers",
        description=(
            "Portable fire extinguishers shall be installed in all occupancies. The type, size, and "
            "distribution shall be in accordance with the requirements of the Fire Code."
        ),
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 10.2.6.7",
        specific_requirements=SpecificRequirements(
            quantity=_extinguisher_quantity,
            type="Type ABC (multi-purpose dry chemical) for general areas; Type K for kitchens; Type BC for "
                 "electrical equipment areas",
            specifications=_extinguisher_specifications,
            distribution="Maximum travel distance of 23 meters (75 feet) to a fire extinguisher",
            installation="Top of extinguisher not more than 1.5 meters (5 feet) above the floor; bottom not "
                         "less than 10 cm (4 inches) above the floor",
            maintenance="Monthly visual inspection; annual maintenance; hydrostatic testing every 5-12 years "
                        "depending on type",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="fire-detection-alarm-system",
        name="Fire Detection and Alarm System",
        description=(
            "An approved fire detection and alarm system shall be installed in buildings with an occupant "
            "load of 50 or more persons and a total floor area of 1,000 square meters or more."
        ),
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 10.2.6.5",
        thresholds=Thresholds(occupant_load=50, floor_area=1000),
        specific_requirements=SpecificRequirements(
            specifications=_alarm_specifications,
            distribution="Manual pull stations at each exit and at each exit stairway on each floor. Maximum "
                         "travel distance to a manual pull station shall not exceed 60 meters (200 feet)",
            installation="Control panel shall be located at the main entrance or in a constantly attended "
                         "location. Smoke detectors in corridors spaced not more than 9 meters (30 feet) apart",
            maintenance="Monthly testing of manual pull stations; Quarterly testing of alarm notification "
                        "devices; Annual testing of all components",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="fire-exit-doors",
        name="Means of Egress - Exit Doors",
        description=(
            "Fire exit doors shall be provided for all occupancies with an occupant load of more than 10 "
            "persons. The number and width of exits shall be in accordance with the occupant load."
        ),
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 10.2.5.2",
        thresholds=Thresholds(occupant_load=10),
        specific_requirements=SpecificRequirements(
            quantity=_exit_quantity,
            specifications=_exit_specifications,
            installation="Exit doors shall swing in the direction of exit travel when serving an occupant load "
                         "of 50 or more. Exit doors shall be equipped with panic hardware when serving an "
                         "occupant load of 100 or more",
            maintenance="Monthly inspection of exit doors, hardware, and signs; Annual testing of panic hardware",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="emergency-lighting",
        name="Emergency Lighting",
        description=(
            "Emergency lighting shall be provided in all means of egress for buildings with an occupant load "
            "of more than 50 persons."
        ),
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 10.2.5.7",
        thresholds=Thresholds(occupant_load=50),
        specific_requirements=SpecificRequirements(
            specifications="Emergency lighting shall provide initial illumination of not less than 10 lux "
                           "(1 foot-candle) and not less than 1 lux (0.1 foot-candle) at any point measured "
                           "along the path of egress at floor level",
            type="Battery-powered emergency lights or generator-powered lighting system",
            installation="Emergency lighting shall be arranged to provide initial illumination along the path of "
                         "egress and shall be so arranged that the failure of any single lighting unit will not "
                         "leave any area in darkness",
            maintenance="Monthly functional testing for a minimum of 30 seconds; Annual testing for 90 minutes",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="exit-signs",
        name="Exit Signs and Directional Signs",
        description=(
            "Illuminated exit signs and directional signs shall be provided in all means of egress for "
            "buildings with an occupant load of more than 50 persons."
        ),
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 10.2.5.6",
        thresholds=Thresholds(occupant_load=50),
        specific_requirements=SpecificRequirements(
            specifications="Exit signs shall be illuminated at all times. Signs shall use letters not less than "
                           "15 cm (6 inches) high with principal strokes not less than 1.9 cm (3/4 inch) wide",
            type="Internally illuminated signs with letters in high contrast colors",
            installation="Exit signs shall be placed so that no point in an exit access corridor is more than "
                         "30 meters (100 feet) from the nearest visible sign. Directional signs shall be provided "
                         "where the direction of travel to reach the nearest exit is not apparent",
            maintenance="Monthly inspection and testing of all exit signs; Annual testing of backup power supply",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="standpipe-system",
        name="Standpipe System",
        description="A standpipe system shall be installed in buildings with a height of more than 15 meters.",
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 10.2.6.3",
        thresholds=Thresholds(stories=5, building_height=15),
        specific_requirements=SpecificRequirements(
            specifications=_standpipe_specifications,
            distribution="Hose connections at each floor level located in the exit stairway. Maximum distance "
                         "between standpipes shall not exceed 61 meters (200 feet)",
            installation="Fire department connections shall be located on the street side of the building and "
                         "shall be not less than 0.45 meters (18 inches) or more than 1.2 meters (4 feet) above grade",
            maintenance="Monthly visual inspection; Annual flow test; Five-year hydrostatic test at 200 PSI "
                        "(13.8 bar) for 2 hours",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="wet-standpipe-system",
        name="Wet Standpipe System",
        description="A wet standpipe system shall be installed in buildings with a height of more than 23 meters (75 feet).",
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 10.2.6.3.2",
        thresholds=Thresholds(stories=8, building_height=23),
        specific_requirements=SpecificRequirements(
            specifications=_wet_standpipe_specifications,
            type="Wet system with water under pressure at all times",
            distribution="Hose connections at each floor level with 38 mm (1.5 inch) and 65 mm (2.5 inch) "
                         "outlets. Maximum distance between standpipes shall not exceed 61 meters (200 feet)",
            installation="Main riser diameter must be minimum 150 mm (6 inches). Fire department connections "
                         "must be provided at street level. System must be interconnected with the building's "
                         "fire pump and water supply",
            maintenance="Weekly visual inspection of control valves; Monthly flow tests; Annual full flow test; "
                        "Five-year hydrostatic test at 200 PSI (13.8 bar) for 2 hours",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="fire-pump",
        name="Fire Pump",
        description=(
            "A fire pump shall be installed for buildings requiring wet standpipe systems or automatic "
            "sprinkler systems with a height of more than 23 meters."
        ),
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 10.2.6.3.4",
        thresholds=Thresholds(stories=8, building_height=23),
        specific_requirements=SpecificRequirements(
            specifications=_fire_pump_specifications,
            type="Electric motor-driven fire pump with backup power source or diesel engine-driven fire pump",
            installation="Fire pump must be installed in a dedicated fire pump room with 2-hour fire resistance "
                         "rating. Room must have direct access to the outside or to a fire-rated exit corridor",
            maintenance="Weekly visual inspection and churn test; Monthly no-flow test; Annual flow test; "
                        "Comprehensive maintenance every 3 years",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="fire-safety-officer",
        name="Fire Safety Officer",
        description=(
            "A certified fire safety officer shall be designated for buildings with an occupant load of more "
            "than 500 persons."
        ),
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 9",
        thresholds=Thresholds(occupant_load=500),
        specific_requirements=SpecificRequirements(
            specifications="Must be certified by the Bureau of Fire Protection (BFP) and must have completed the "
                           "prescribed Fire Safety Officer Training Course",
            maintenance="Must maintain certification through continuing education and periodic recertification "
                        "as required by BFP",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="fire-safety-plan",
        name="Fire Safety Plan",
        description=(
            "A fire safety plan shall be prepared and maintained for buildings with an occupant load of more "
            "than 100 persons."
        ),
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 9.0.4",
        thresholds=Thresholds(occupant_load=100),
        specific_requirements=SpecificRequirements(
            specifications="Must include emergency procedures, evacuation plans, location of fire protection "
                           "equipment, and contact information for emergency personnel",
            installation="Must be posted in conspicuous locations throughout the building",
            maintenance="Must be reviewed and updated annually or whenever there are changes to the building "
                        "layout or occupancy",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="fire-drill",
        name="Fire Drill",
        description=(
            "Fire drills shall be conducted at least twice a year for buildings with an occupant load of more "
            "than 50 persons."
        ),
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 9.0.5",
        thresholds=Thresholds(occupant_load=50),
        specific_requirements=SpecificRequirements(
            specifications="Must include complete evacuation of all occupants to a designated assembly area. "
                           "Must test alarm systems and evacuation procedures",
            maintenance="Records of all fire drills must be maintained, including date, time, participants, "
                        "evacuation time, and any issues identified",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="fire-hydrant",
        name="Fire Hydrant",
        description=(
            "A fire hydrant shall be installed within 100 meters of the building with a floor area of more "
            "than 2,000 square meters."
        ),
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 10, Division 3",
        thresholds=Thresholds(floor_area=2000),
        specific_requirements=SpecificRequirements(
            quantity=_hydrant_quantity,
            specifications="Minimum flow rate of 1,000 GPM (3,785 LPM) for high-value districts; 500 GPM "
                           "(1,893 LPM) for residential areas",
            distribution="Maximum distance between hydrants shall not exceed 150 meters (500 feet) in high-value "
                         "districts; 300 meters (1,000 feet) in residential areas",
            installation="Hydrants shall be located not less than 12 meters (40 feet) from the building. "
                         "Hydrants shall be installed so that the center of the 115 mm (4.5 inch) outlet is not "
                         "less than 0.45 meters (18 inches) above grade",
            maintenance="Semi-annual inspection and testing; Annual flow test; Five-year flow test and maintenance",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="fire-department-connection",
        name="Fire Department Connection",
        description="A fire department connection shall be installed for buildings with a height of more than 15 meters.",
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 10.2.6.3.3",
        thresholds=Thresholds(stories=5, building_height=15),
        specific_requirements=SpecificRequirements(
            specifications="Minimum 100 mm (4-inch) connection with two 65 mm (2.5-inch) inlets with National "
                           "Standard threads",
            installation="Located on the street side of the building, not less than 0.45 meters (18 inches) and "
                         "not more than 1.2 meters (4 feet) above grade. Must be identified with a sign reading "
                         "\"FIRE DEPARTMENT CONNECTION\" in red letters at least 25 mm (1 inch) high",
            maintenance="Quarterly inspection; Annual testing; Must be kept clear and accessible at all times",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="smoke-control-system",
        name="Smoke Control System",
        description=(
            "A smoke control system shall be installed in buildings with an atrium or in high-rise buildings "
            "with a height of more than 23 meters (75 feet)."
        ),
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 10.2.6.8",
        thresholds=Thresholds(stories=8, building_height=23),
        specific_requirements=SpecificRequirements(
            specifications=_smoke_control_specifications,
            type="Mechanical exhaust system, pressurization system, or combination system",
            installation="System must be designed in accordance with NFPA 92 or equivalent standards. Control "
                         "panel shall be located at the fire command center",
            maintenance="Quarterly testing of all components; Annual full system test; Comprehensive maintenance "
                        "every 3 years",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="fire-command-center",
        name="Fire Command Center",
        description="A fire command center shall be provided for buildings with a height of more than 23 meters (75 feet).",
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 10.2.6.9",
        thresholds=Thresholds(stories=8, building_height=23),
        specific_requirements=SpecificRequirements(
            specifications="The fire command center shall be separated from the remainder of the building by a "
                           "fire barrier with a minimum 2-hour fire resistance rating. The room shall be a minimum "
                           "of 10 square meters (96 square feet) with a minimum dimension of 2.4 meters (8 feet).",
            type="Dedicated room with fire alarm control panel, emergency voice/alarm communication system, fire "
                 "department communication system, fire pump status indicators, elevator status and controls, "
                 "and smoke control panel",
            installation="Located on the ground floor with direct access to the exterior or at a location "
                         "approved by the fire department. The room shall be provided with emergency lighting "
                         "and ventilation",
            maintenance="Monthly inspection of all components; Annual testing of all systems; Comprehensive "
                        "maintenance every 3 years",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="fire-resistance-rating",
        name="Fire Resistance Rating",
        description=(
            "Building elements shall have a fire resistance rating in accordance with the occupancy type and "
            "building height."
        ),
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 7",
        specific_requirements=SpecificRequirements(
            specifications=_fire_resistance_specifications,
            type="Fire resistance ratings must be achieved through approved materials and assemblies tested "
                 "according to recognized standards",
            installation="All penetrations through fire-rated assemblies must be properly sealed with approved "
                         "firestopping materials",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="emergency-power-supply",
        name="Emergency Power Supply",
        description=(
            "An emergency power supply shall be provided for high-rise buildings with a height of more than "
            "23 meters (75 feet) and an occupant load of more than 500 persons."
        ),
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 10",
        thresholds=Thresholds(occupant_load=500, stories=8, building_height=23),
        specific_requirements=SpecificRequirements(
            specifications="Emergency power must be capable of providing power for a minimum duration of 2 hours",
            type="Diesel generator set or other approved emergency power supply system",
            installation="Emergency power supply must be installed in a dedicated room with 2-hour fire "
                         "resistance rating",
            maintenance="Weekly testing under no-load conditions; Monthly testing under load conditions; Annual "
                        "full load test for minimum 2 hours",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="means-of-egress",
        name="Means of Egress",
        description=(
            "Means of egress shall be provided in accordance with the occupant load and travel distance "
            "requirements."
        ),
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 10, Division 2",
        specific_requirements=SpecificRequirements(
            specifications=_egress_specifications,
            type="Exits must be clearly marked with illuminated exit signs. Exit access, exit, and exit discharge "
                 "must be continuously maintained free of obstructions",
            installation="Exit doors must swing in the direction of exit travel when serving an occupant load of "
                         "50 or more. Dead-end corridors must not exceed 6 meters (20 feet) in length",
            maintenance="Monthly inspection of exit pathways, doors, and signs; Annual testing of emergency "
                        "lighting and exit signs",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="fire-barrier",
        name="Fire Barriers and Partitions",
        description=(
            "Fire barriers and partitions shall be provided to separate different occupancies and hazardous areas."
        ),
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 7",
        specific_requirements=SpecificRequirements(
            specifications="Fire barriers separating different occupancies must have a minimum 2-hour fire "
                           "resistance rating. Fire barriers enclosing exit stairways must have a minimum 2-hour "
                           "fire resistance rating",
            type="Fire barriers must extend from the floor to the underside of the floor or roof above, or to "
                 "the underside of the fire-rated floor/ceiling or roof/ceiling assembly",
            installation="All penetrations through fire barriers must be protected with approved firestopping "
                         "materials. Doors in fire barriers must be fire-rated and self-closing",
            maintenance="Annual inspection of fire barriers, doors, and penetration seals",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="fire-safety-maintenance-report",
        name="Fire Safety Maintenance Report (FSMR)",
        description=(
            "A Fire Safety Maintenance Report (FSMR) shall be prepared and maintained by the building owner or "
            "administrator, documenting all fire safety features, equipment, and procedures."
        ),
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 10.1.4",
        specific_requirements=SpecificRequirements(
            specifications="The FSMR shall include an inventory of all fire protection equipment and systems, "
                           "maintenance schedules, testing records, and inspection reports.",
            type="Written document with electronic backup recommended",
            distribution="Copies shall be maintained on-site and be readily available for inspection by fire "
                         "safety officials",
            installation="Not applicable",
            maintenance="Monthly updates for routine maintenance; Immediate updates for any changes to fire "
                        "protection systems or equipment; Annual comprehensive review and update",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="fire-safety-inspection-certificate",
        name="Fire Safety Inspection Certificate (FSIC)",
        description=(
            "A Fire Safety Inspection Certificate (FSIC) shall be obtained from the Bureau of Fire Protection "
            "prior to occupancy and shall be renewed annually."
        ),
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 9",
        specific_requirements=SpecificRequirements(
            specifications="The FSIC certifies that the building complies with all applicable fire safety "
                           "requirements and standards.",
            type="Official document issued by the Bureau of Fire Protection",
            distribution="Original copy shall be displayed prominently at the main entrance or lobby of the building",
            installation="Not applicable",
            maintenance="Annual renewal required after inspection by the Bureau of Fire Protection",
        ),
    ),
    FireSafetyRequirement(
        requirement_id="emergency-evacuation-plan",
        name="Emergency Evacuation Plan",
        description=(
            "An emergency evacuation plan shall be prepared and maintained for all buildings with an occupant "
            "load of more than 50 persons."
        ),
        applicable_occupancies=ALL,
        reference="RA 9514 IRR Rule 10.2.5.11",
        thresholds=Thresholds(occupant_load=50),
        specific_requirements=SpecificRequirements(
            specifications="The emergency evacuation plan shall include procedures for reporting emergencies, "
                           "occupant and staff response to emergencies, evacuation, relocation, and accounting "
                           "for occupants.",
            type="Written document with floor plans showing exit routes, assembly points, and locations of fire "
                 "protection equipment",
            distribution="Copies shall be provided to all building staff and posted at conspicuous locations on "
                         "each floor",
            installation="Floor plans shall be oriented correctly with \"YOU ARE HERE\" markers",
            maintenance="Annual review and update; Immediate update following any changes to the building layout "
                        "or fire protection systems",
        ),
    ),
)


def get_requirement(requirement_id: str) -> FireSafetyRequirement:
    for req in FIRE_SAFETY_REQUIREMENTS:
        if req.requirement_id == requirement_id:
            return req
    raise ValueError(f"Unknown fire safety requirement: {requirement_id}")
