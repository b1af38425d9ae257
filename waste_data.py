# This module is the knowledge base of the app
# It holds the keyword lists used to recognise each waste category, a description of every category,
# its energy efficiency figures and the energy conversion methods we recommend for it
# All numeric metrics are stored on a 0-100 scale, the charts convert them when they need another scale

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple


class WasteCategory(str, Enum):
    """The fixed waste taxonomy. The order is the order categories are scanned in."""

    ORGANIC = "organic"
    PLASTIC = "plastic"
    METAL = "metal"
    GLASS = "glass"
    ELECTRONIC = "electronic"
    TEXTILE = "textile"
    HAZARDOUS = "hazardous"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class EfficiencyMetrics:
    potential_energy: float
    conversion_efficiency: float
    processing_complexity: float
    carbon_footprint: float
    resource_recovery: float


@dataclass(frozen=True)
class EnergyEfficiency:
    potential_energy: str
    conversion_efficiency: str
    best_methods: str
    carbon_footprint: str
    resource_recovery: str
    metrics: EfficiencyMetrics


@dataclass(frozen=True)
class CategoryDetail:
    category: WasteCategory
    description: str
    energy_efficiency: EnergyEfficiency


@dataclass(frozen=True)
class EnergyConversionMethod:
    method: str
    description: str
    efficiency: str
    waste_types: str
    environmental_benefits: str


# keywords searched for (as substrings) in the classifier labels, per category
CATEGORY_KEYWORDS: Dict[WasteCategory, Tuple[str, ...]] = {
    WasteCategory.ORGANIC: (
        "food", "fruit", "vegetable", "plant", "leaf", "wood", "paper", "cardboard", "coffee", "tea",
    ),
    WasteCategory.PLASTIC: (
        "bottle", "container", "plastic", "polymer", "packaging", "bag", "wrapper",
    ),
    WasteCategory.METAL: ("can", "aluminum", "tin", "steel", "metal", "foil"),
    WasteCategory.GLASS: ("bottle", "jar", "glass", "window"),
    WasteCategory.ELECTRONIC: (
        "computer", "phone", "electronic", "device", "battery", "cable", "charger", "appliance",
    ),
    WasteCategory.TEXTILE: ("clothing", "fabric", "textile", "cloth", "garment", "shoe"),
    WasteCategory.HAZARDOUS: ("chemical", "paint", "oil", "battery", "medicine", "pharmaceutical"),
    WasteCategory.UNKNOWN: (),
}

# generic words that mark a label as waste, followed by every category keyword
WASTE_INDICATOR_KEYWORDS: Tuple[str, ...] = (
    "waste", "trash", "garbage", "rubbish", "litter", "refuse", "debris", "junk", "recycle",
    "recyclable", "disposal", "dump", "landfill", "bin", "container",
) + tuple(keyword for keywords in CATEGORY_KEYWORDS.values() for keyword in keywords)


_CATEGORY_DETAILS: Dict[WasteCategory, CategoryDetail] = {
    WasteCategory.ORGANIC: CategoryDetail(
        category=WasteCategory.ORGANIC,
        description=(
            "Biodegradable waste that comes from plants or animals. Includes food waste, paper, "
            "cardboard, and yard trimmings."
        ),
        energy_efficiency=EnergyEfficiency(
            potential_energy="Medium to High (8-15 MJ/kg)",
            conversion_efficiency="60-80% for anaerobic digestion, 25-35% for direct combustion",
            best_methods="Anaerobic digestion, composting with heat recovery, biomass combustion",
            carbon_footprint=(
                "Low when properly managed, can be carbon-neutral or negative with methane capture"
            ),
            resource_recovery="Produces biogas, compost, and soil amendments as valuable byproducts",
            metrics=EfficiencyMetrics(65, 70, 40, 25, 80),
        ),
    ),
    WasteCategory.PLASTIC: CategoryDetail(
        category=WasteCategory.PLASTIC,
        description=(
            "Synthetic materials made from polymers. Includes bottles, containers, packaging, and "
            "single-use items."
        ),
        energy_efficiency=EnergyEfficiency(
            potential_energy="Very High (35-45 MJ/kg, similar to fossil fuels)",
            conversion_efficiency="70-85% for pyrolysis, 25-30% for incineration with energy recovery",
            best_methods="Pyrolysis, plastic-to-fuel conversion, waste-to-energy incineration",
            carbon_footprint=(
                "Medium to high due to fossil origin, but offsets virgin plastic production"
            ),
            resource_recovery=(
                "Can produce synthetic fuels, oils, and gases with properties similar to petroleum products"
            ),
            metrics=EfficiencyMetrics(90, 75, 60, 65, 70),
        ),
    ),
    WasteCategory.METAL: CategoryDetail(
        category=WasteCategory.METAL,
        description=(
            "Recyclable materials like aluminum cans, steel containers, and scrap metal that can be "
            "melted and reformed."
        ),
        energy_efficiency=EnergyEfficiency(
            potential_energy="Low as direct fuel, but very high embodied energy",
            conversion_efficiency=(
                "Not typically used for energy conversion, 95% energy savings through recycling"
            ),
            best_methods="Recycling is far more energy-efficient than energy recovery",
            carbon_footprint=(
                "Recycling reduces carbon emissions by 60-95% compared to virgin production"
            ),
            resource_recovery="Nearly 100% recyclable without quality degradation for most metals",
            metrics=EfficiencyMetrics(30, 20, 50, 20, 95),
        ),
    ),
    WasteCategory.GLASS: CategoryDetail(
        category=WasteCategory.GLASS,
        description=(
            "Recyclable material made from sand. Includes bottles, jars, and broken glass items."
        ),
        energy_efficiency=EnergyEfficiency(
            potential_energy="Very low (not suitable for energy conversion)",
            conversion_efficiency=(
                "Not used for energy conversion, 25-30% energy savings through recycling"
            ),
            best_methods="Recycling or repurposing as construction materials",
            carbon_footprint="Recycling reduces carbon emissions by approximately 20-30%",
            resource_recovery="Can be recycled indefinitely without loss of quality",
            metrics=EfficiencyMetrics(15, 10, 45, 30, 90),
        ),
    ),
    WasteCategory.ELECTRONIC: CategoryDetail(
        category=WasteCategory.ELECTRONIC,
        description=(
            "Discarded electrical or electronic devices. Includes computers, phones, appliances, "
            "and batteries."
        ),
        energy_efficiency=EnergyEfficiency(
            potential_energy="Variable (plastic components: 30-40 MJ/kg, metals: low direct energy)",
            conversion_efficiency="25-35% for advanced thermal treatment after material recovery",
            best_methods=(
                "Precious metal recovery followed by thermal treatment of remaining fractions"
            ),
            carbon_footprint="High if improperly disposed, medium with proper recovery processes",
            resource_recovery=(
                "Contains valuable metals (gold, silver, copper) at concentrations higher than natural ores"
            ),
            metrics=EfficiencyMetrics(50, 30, 85, 60, 85),
        ),
    ),
    WasteCategory.TEXTILE: CategoryDetail(
        category=WasteCategory.TEXTILE,
        description=(
            "Fabric and clothing items made from natural or synthetic fibers that can often be "
            "reused or recycled."
        ),
        energy_efficiency=EnergyEfficiency(
            potential_energy="Medium (15-20 MJ/kg for mixed textiles, higher for synthetics)",
            conversion_efficiency=(
                "20-25% for gasification, 60-75% for pyrolysis of synthetic textiles"
            ),
            best_methods="Reuse, recycling, gasification, or pyrolysis for synthetic materials",
            carbon_footprint="Medium, lower with reuse and recycling compared to energy recovery",
            resource_recovery="Natural fibers can be composted, synthetics can be converted to fuels",
            metrics=EfficiencyMetrics(55, 45, 55, 45, 60),
        ),
    ),
    WasteCategory.HAZARDOUS: CategoryDetail(
        category=WasteCategory.HAZARDOUS,
        description=(
            "Materials that are potentially harmful to human health or the environment. Requires "
            "special handling."
        ),
        energy_efficiency=EnergyEfficiency(
            potential_energy="Variable (some solvents and oils have high energy content)",
            conversion_efficiency=(
                "Safety prioritized over efficiency, specialized high-temperature treatment"
            ),
            best_methods=(
                "Specialized treatment, high-temperature incineration, cement kiln co-processing"
            ),
            carbon_footprint=(
                "Can be high, but proper treatment prevents more harmful environmental impacts"
            ),
            resource_recovery="Limited, focus is on safe destruction and containment",
            metrics=EfficiencyMetrics(40, 25, 90, 70, 30),
        ),
    ),
    WasteCategory.UNKNOWN: CategoryDetail(
        category=WasteCategory.UNKNOWN,
        description=(
            "The system couldn't confidently identify the type of waste. Consider consulting waste "
            "management professionals."
        ),
        energy_efficiency=EnergyEfficiency(
            potential_energy="Unknown (requires professional assessment)",
            conversion_efficiency="Varies based on composition",
            best_methods="Professional waste assessment, mechanical biological treatment",
            carbon_footprint="Unknown without proper characterization",
            resource_recovery="Mechanical biological treatment can recover 40-60% of materials",
            metrics=EfficiencyMetrics(50, 40, 70, 50, 50),
        ),
    ),
}


_CONVERSION_METHODS: Dict[WasteCategory, Tuple[EnergyConversionMethod, ...]] = {
    WasteCategory.ORGANIC: (
        EnergyConversionMethod(
            method="Anaerobic Digestion",
            description=(
                "Converts organic waste into biogas (methane and carbon dioxide) through bacterial "
                "decomposition in oxygen-free environments. The biogas can be used for electricity "
                "generation, heating, or as vehicle fuel."
            ),
            efficiency=(
                "Can convert up to 60-80% of the energy content in organic waste to usable biogas, "
                "with 1 ton of food waste producing approximately 300-500 cubic meters of biogas."
            ),
            waste_types=(
                "Food waste, agricultural residues, sewage sludge, animal manure, and other "
                "biodegradable materials."
            ),
            environmental_benefits=(
                "Reduces methane emissions from landfills, produces renewable energy, and creates "
                "nutrient-rich digestate that can be used as fertilizer."
            ),
        ),
        EnergyConversionMethod(
            method="Composting with Heat Recovery",
            description=(
                "Captures heat generated during the aerobic decomposition process for space heating "
                "or hot water. Advanced systems use heat exchangers embedded in compost piles to "
                "extract thermal energy."
            ),
            efficiency=(
                "30-40% of the energy in organic waste can be recovered as heat, with temperatures "
                "reaching 50-70°C in active compost piles."
            ),
            waste_types=(
                "Yard trimmings, food scraps, agricultural waste, paper products, and wood chips."
            ),
            environmental_benefits=(
                "Produces valuable compost for soil improvement, reduces landfill waste, and "
                "captures energy that would otherwise be lost as heat."
            ),
        ),
        EnergyConversionMethod(
            method="Biomass Direct Combustion",
            description=(
                "Burning dried organic waste directly in specialized boilers to generate steam for "
                "electricity production or heating applications."
            ),
            efficiency=(
                "Modern biomass power plants can achieve 25-35% electrical efficiency, with combined "
                "heat and power systems reaching overall efficiencies of 80-90%."
            ),
            waste_types=(
                "Wood waste, agricultural residues, dedicated energy crops, and dried organic "
                "municipal waste."
            ),
            environmental_benefits=(
                "Considered carbon-neutral when sustainably managed, reduces landfill volume, and "
                "provides baseload renewable energy."
            ),
        ),
    ),
    WasteCategory.PLASTIC: (
        EnergyConversionMethod(
            method="Pyrolysis",
            description=(
                "Thermal decomposition of plastic waste in the absence of oxygen to produce "
                "synthetic fuels (pyrolysis oil), syngas, and char. The process breaks down polymer "
                "chains into smaller hydrocarbon molecules."
            ),
            efficiency=(
                "Can convert 1 ton of plastic waste into approximately 750-850 liters of fuel oil "
                "with energy content similar to diesel fuel (42-45 MJ/kg)."
            ),
            waste_types=(
                "Most thermoplastics including polyethylene (PE), polypropylene (PP), and "
                "polystyrene (PS). Less effective for PET and PVC."
            ),
            environmental_benefits=(
                "Diverts plastic from landfills and oceans, reduces dependency on fossil fuels, and "
                "has lower emissions than incineration."
            ),
        ),
        EnergyConversionMethod(
            method="Waste-to-Energy Incineration",
            description=(
                "Controlled burning of plastic waste in advanced facilities with emissions control "
                "systems to generate electricity or heat. Modern plants use moving grate technology "
                "and extensive flue gas treatment."
            ),
            efficiency=(
                "Modern facilities can achieve 25-30% electrical efficiency, with combined heat and "
                "power systems reaching overall efficiencies of 80%."
            ),
            waste_types=(
                "Mixed plastic waste, including non-recyclable plastics, multi-layer packaging, and "
                "contaminated plastic materials."
            ),
            environmental_benefits=(
                "Reduces landfill volume by up to 90%, destroys potential harmful substances, and "
                "offsets fossil fuel use."
            ),
        ),
        EnergyConversionMethod(
            method="Plastic to Fuel (PTF)",
            description=(
                "Advanced catalytic conversion processes that transform plastic waste into liquid "
                "fuels with properties similar to conventional petroleum products. Can produce "
                "diesel, gasoline, and kerosene fractions."
            ),
            efficiency=(
                "Up to 85% of plastic input can be converted to liquid fuels, with energy recovery "
                "rates of 38-40 MJ/kg."
            ),
            waste_types=(
                "Polyethylene (PE), polypropylene (PP), and polystyrene (PS) yield the highest "
                "quality fuel products."
            ),
            environmental_benefits=(
                "Creates value from waste plastics, reduces landfill pressure, and produces "
                "lower-sulfur fuels than conventional petroleum."
            ),
        ),
    ),
    WasteCategory.METAL: (
        EnergyConversionMethod(
            method="Recycling",
            description=(
                "Metals are best recycled rather than converted to energy, saving significant "
                "energy compared to primary production. The process involves collection, sorting, "
                "shredding, melting, and reforming."
            ),
            efficiency=(
                "Energy savings of 95% for aluminum, 85% for copper, and 60-74% for steel compared "
                "to virgin material production."
            ),
            waste_types=(
                "Aluminum cans, steel containers, copper wiring, brass fixtures, zinc components, "
                "and precious metals from electronics."
            ),
            environmental_benefits=(
                "Reduces mining impacts, conserves natural resources, decreases energy consumption, "
                "and lowers greenhouse gas emissions."
            ),
        ),
        EnergyConversionMethod(
            method="Metal Recovery from Incineration",
            description=(
                "Extraction of metals from incineration bottom ash using magnetic separators, eddy "
                "current separators, and advanced sorting technologies."
            ),
            efficiency=(
                "Can recover 80-90% of ferrous metals and 50-70% of non-ferrous metals from "
                "incineration residues."
            ),
            waste_types=(
                "Mixed municipal waste containing metal components that enter waste-to-energy "
                "facilities."
            ),
            environmental_benefits=(
                "Recovers valuable resources that would otherwise be landfilled and reduces the "
                "environmental footprint of waste disposal."
            ),
        ),
    ),
    WasteCategory.GLASS: (
        EnergyConversionMethod(
            method="Recycling",
            description=(
                "Glass is best recycled rather than converted to energy, as it can be remelted "
                "indefinitely without quality degradation. The process involves collection, color "
                "sorting, crushing into cullet, and remelting."
            ),
            efficiency=(
                "Energy savings of 25-30% compared to virgin glass production, with 1 ton of "
                "recycled glass saving approximately 1.2 tons of raw materials."
            ),
            waste_types=(
                "Container glass (bottles and jars), flat glass (windows), and specialty glass "
                "products."
            ),
            environmental_benefits=(
                "Reduces mining of raw materials, decreases energy use and associated emissions, and "
                "diverts waste from landfills."
            ),
        ),
        EnergyConversionMethod(
            method="Glass Aggregate Production",
            description=(
                "Crushing waste glass into various sizes for use as construction aggregate, "
                "abrasives, or filtration media when recycling into new glass is not feasible."
            ),
            efficiency=(
                "Energy conservation rather than generation, but saves the embodied energy in glass "
                "materials."
            ),
            waste_types=(
                "Mixed color glass, contaminated glass, or glass types that cannot be easily "
                "recycled into new containers."
            ),
            environmental_benefits=(
                "Reduces landfill waste, decreases demand for virgin aggregate materials, and can "
                "improve drainage properties in construction applications."
            ),
        ),
    ),
    WasteCategory.ELECTRONIC: (
        EnergyConversionMethod(
            method="Precious Metal Recovery",
            description=(
                "Extraction of valuable metals like gold, silver, platinum, and copper from "
                "electronic waste through mechanical processing, hydrometallurgical, or "
                "pyrometallurgical methods."
            ),
            efficiency=(
                "One ton of circuit boards can contain 40-800 times the concentration of gold found "
                "in gold ore and 30-40 times the concentration of copper in copper ore."
            ),
            waste_types=(
                "Circuit boards, connectors, computer components, mobile phones, and other "
                "high-value electronic components."
            ),
            environmental_benefits=(
                "Reduces mining impacts, conserves rare resources, prevents toxic materials from "
                "entering landfills, and saves significant energy compared to primary production."
            ),
        ),
        EnergyConversionMethod(
            method="Waste-to-Energy Incineration",
            description=(
                "After removal of hazardous components and valuable materials, remaining "
                "non-recyclable fractions can be incinerated for energy recovery in specialized "
                "facilities."
            ),
            efficiency=(
                "Variable depending on composition, but plastic components can yield 30-40 MJ/kg of "
                "energy."
            ),
            waste_types=(
                "Non-recyclable plastic housings, mixed materials, and other combustible components "
                "after removal of hazardous substances."
            ),
            environmental_benefits=(
                "Reduces landfill volume and recovers energy from materials that cannot be "
                "effectively recycled."
            ),
        ),
        EnergyConversionMethod(
            method="Advanced Thermal Treatment",
            description=(
                "Specialized processes like plasma arc gasification that use extremely high "
                "temperatures to break down electronic waste into syngas and an inert vitrified slag."
            ),
            efficiency=(
                "Can achieve electrical efficiencies of 25-35% with high-temperature processes that "
                "effectively destroy hazardous organic compounds."
            ),
            waste_types=(
                "Mixed electronic waste including hazardous components that require thermal "
                "destruction."
            ),
            environmental_benefits=(
                "Destroys toxic organic compounds, immobilizes heavy metals in slag, and produces "
                "renewable energy."
            ),
        ),
    ),
    WasteCategory.TEXTILE: (
        EnergyConversionMethod(
            method="Gasification",
            description=(
                "Converts textile waste into syngas (a mixture of carbon monoxide, hydrogen, and "
                "methane) through partial oxidation at high temperatures. The syngas can be used for "
                "electricity generation or converted to liquid fuels."
            ),
            efficiency=(
                "Can achieve 20-25% electrical efficiency, with 1 ton of textile waste producing "
                "approximately 700-1000 cubic meters of syngas."
            ),
            waste_types=(
                "Natural and synthetic fabrics, carpet waste, and mixed textile materials that "
                "cannot be recycled or reused."
            ),
            environmental_benefits=(
                "Diverts textiles from landfills, produces fewer emissions than direct incineration, "
                "and generates renewable energy."
            ),
        ),
        EnergyConversionMethod(
            method="Waste-to-Energy Incineration",
            description=(
                "Controlled burning of textile waste in advanced facilities to generate electricity "
                "or heat, with extensive emissions control systems."
            ),
            efficiency=(
                "Modern facilities can achieve 25-30% electrical efficiency, with textiles having a "
                "calorific value of approximately 15-20 MJ/kg."
            ),
            waste_types=(
                "Mixed textile waste, contaminated fabrics, and synthetic materials that are "
                "difficult to recycle."
            ),
            environmental_benefits=(
                "Reduces landfill volume and recovers energy from materials that would otherwise be "
                "wasted."
            ),
        ),
        EnergyConversionMethod(
            method="Pyrolysis of Synthetic Textiles",
            description=(
                "Thermal decomposition of synthetic textile waste in the absence of oxygen to "
                "produce oils and gases that can be used as fuels."
            ),
            efficiency=(
                "Can convert 60-75% of synthetic textile mass into usable fuel products with high "
                "energy content."
            ),
            waste_types="Polyester, nylon, acrylic, and other petroleum-based synthetic fabrics.",
            environmental_benefits=(
                "Recovers the embodied energy in synthetic textiles and reduces landfill waste."
            ),
        ),
    ),
    WasteCategory.HAZARDOUS: (
        EnergyConversionMethod(
            method="Specialized Treatment",
            description=(
                "Hazardous waste typically requires specialized treatment for safe disposal rather "
                "than energy recovery. This may include neutralization, stabilization, "
                "encapsulation, or other treatment methods."
            ),
            efficiency=(
                "Safety is prioritized over energy recovery, though some processes may recover heat "
                "or materials."
            ),
            waste_types=(
                "Chemical waste, medical waste, radioactive materials, heavy metal-containing waste, "
                "and other regulated hazardous substances."
            ),
            environmental_benefits=(
                "Prevents environmental contamination and protects public health by safely managing "
                "dangerous materials."
            ),
        ),
        EnergyConversionMethod(
            method="High-Temperature Incineration",
            description=(
                "Destruction of hazardous organic compounds in specially designed incinerators "
                "operating at temperatures of 850-1200°C with advanced emissions control systems."
            ),
            efficiency=(
                "Energy recovery is secondary to destruction efficiency, but modern facilities can "
                "recover heat for steam or electricity production."
            ),
            waste_types=(
                "Organic solvents, pesticides, pharmaceutical waste, and other combustible "
                "hazardous materials."
            ),
            environmental_benefits=(
                "Destroys harmful compounds, reduces waste volume by up to 90%, and can recover "
                "energy while ensuring safe disposal."
            ),
        ),
        EnergyConversionMethod(
            method="Cement Kiln Co-processing",
            description=(
                "Using suitable hazardous waste as alternative fuel in cement kilns, where high "
                "temperatures (1400-1500°C) ensure complete destruction of toxic compounds."
            ),
            efficiency=(
                "Replaces fossil fuels in cement production while safely destroying waste, with "
                "energy utilization rates of 80-90%."
            ),
            waste_types=(
                "Waste oils, solvents, paint residues, and other high-calorific hazardous wastes "
                "compatible with cement production."
            ),
            environmental_benefits=(
                "Reduces fossil fuel consumption in cement industry, ensures complete destruction of "
                "hazardous compounds, and eliminates the need for separate incineration facilities."
            ),
        ),
    ),
    WasteCategory.UNKNOWN: (
        EnergyConversionMethod(
            method="Professional Waste Assessment",
            description=(
                "Unidentified waste should be assessed by waste management professionals for proper "
                "characterization, classification, and handling. This involves sampling, laboratory "
                "analysis, and expert evaluation."
            ),
            efficiency=(
                "N/A - Safety and proper identification take precedence over energy recovery."
            ),
            waste_types=(
                "Mixed waste of unknown composition, unusual waste streams, or materials that "
                "cannot be readily identified."
            ),
            environmental_benefits=(
                "Ensures waste is handled appropriately to minimize environmental impacts and "
                "maximize resource recovery potential."
            ),
        ),
        EnergyConversionMethod(
            method="Mechanical Biological Treatment (MBT)",
            description=(
                "Combined approach that separates mixed waste into recyclable materials, organic "
                "fraction for biological treatment, and refuse-derived fuel (RDF) for energy "
                "recovery."
            ),
            efficiency=(
                "Can recover 40-60% of materials for recycling or composting, with remaining RDF "
                "having a calorific value of 14-18 MJ/kg."
            ),
            waste_types=(
                "Mixed municipal solid waste or unidentified waste streams that require sorting and "
                "processing."
            ),
            environmental_benefits=(
                "Maximizes material recovery, reduces landfill disposal, and produces renewable "
                "energy from non-recyclable fractions."
            ),
        ),
    ),
}

# every category must have details and methods, a gap here is a programming error
for _category in WasteCategory:
    for _table in (_CATEGORY_DETAILS, _CONVERSION_METHODS, CATEGORY_KEYWORDS):
        if _category not in _table:
            raise RuntimeError(f"Knowledge base is missing an entry for {_category.value}")


def category_detail(category: WasteCategory) -> CategoryDetail:
    """Return the description and efficiency block of a category."""
    return _CATEGORY_DETAILS[WasteCategory(category)]


def conversion_methods(category: WasteCategory) -> List[EnergyConversionMethod]:
    """Return the recommended conversion methods of a category, in knowledge base order."""
    return list(_CONVERSION_METHODS[WasteCategory(category)])
