from appraisal.models.service_model import Service

# Tarifas 2024
SERVICES: list[Service] = [
    Service(name="Avalúo de apartamento", price_label="$350.000", category="Inmuebles urbanos", type="Residencial", icon="FaBuilding"),
    Service(name="Avalúo de casa", price_label="$450.000", category="Inmuebles urbanos", type="Residencial", icon="FaHome"),
    Service(name="Avalúo de lote urbano", price_label="$400.000", category="Inmuebles urbanos", type="Terrenos", icon="FaMapMarkedAlt"),
    Service(name="Avalúo de local comercial", price_label="$650.000", category="Inmuebles urbanos", type="Comercial", icon="FaStore"),
    Service(name="Avalúo de oficina", price_label="$550.000", category="Inmuebles urbanos", type="Comercial", icon="FaBriefcase"),
    Service(name="Avalúo de bodega", price_label="$1.200.000", category="Inmuebles urbanos", type="Industrial", icon="FaWarehouse"),
    Service(name="Avalúo de finca", price_label="$1.800.000", category="Inmuebles rurales", type="Rural", icon="FaTractor"),
    Service(name="Avalúo de predio rural", price_label="$950.000", category="Inmuebles rurales", type="Terrenos", icon="FaTree"),
    Service(name="Avalúo de hacienda productiva", price_label="$5.500.000", category="Inmuebles rurales", type="Rural", icon="FaSeedling"),
    Service(name="Avalúo de maquinaria y equipo", price_label="$2.500.000", category="Bienes muebles", type="Industrial", icon="FaCogs"),
    Service(name="Avalúo de vehículo", price_label="$300.000", category="Bienes muebles", type="Vehículos", icon="FaCar"),
    Service(name="Avalúo de flota de vehículos", price_label="$3.200.000", category="Bienes muebles", type="Vehículos", icon="FaTruck"),
    Service(name="Avalúo de planta industrial", price_label="$12.000.000", category="Avalúos especiales", type="Industrial", icon="FaIndustry"),
    Service(name="Avalúo para renta (arrendamiento)", price_label="$480.000", category="Avalúos especiales", type="Comercial", icon="FaFileContract"),
    Service(name="Avalúo NIIF de activos fijos", price_label="$7.800.000", category="Avalúos especiales", type="Contable", icon="FaChartLine"),
    Service(name="Avalúo de servidumbre", price_label="$1.500.000", category="Avalúos especiales", type="Terrenos", icon="FaRoad"),
    Service(name="Estudio de títulos", price_label="$250.000", category="Consultoría", type="Jurídico", icon="FaBalanceScale"),
    Service(name="Dictamen pericial judicial", price_label="$3.500.000", category="Consultoría", type="Jurídico", icon="FaGavel"),
]
