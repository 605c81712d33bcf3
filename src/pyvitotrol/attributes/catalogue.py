"""Built-in Vitotrol attribute catalogue.

Static seed data for :class:`~pyvitotrol.attributes.registry.AttributeRegistry`.
Each constant is an attribute ID; the trailing comment is the Vitotrol
service's own variable name.

Circuit suffixes follow the installation this catalogue was mapped on:
  M1 = radiator circuit, M2 = floor heating circuit.

Attribute names are the stable lookup keys of the registry.  Once published,
names MUST NOT change.
"""

from __future__ import annotations

from pyvitotrol.attributes.definitions import NO_ATTR, AttrAccess, AttrRef
from pyvitotrol.types import TYPE_DATE, TYPE_DOUBLE, TYPE_STRING, enum_type

# ---------------------------------------------------------------------------
# Attribute IDs
# ---------------------------------------------------------------------------
AUSSEN_TEMP = 5373  # temp_ats_r
ABGAS_TEMP = 5372  # temp_agt_r
BOILER_TEMP = 5374  # temp_kts_r
HEISSWASSER_TEMP = 5381  # temp_ww_r
HEISSWASSER_AUSGANG_TEMP = 5382  # temp_auslauf_r
HEIZWASSER_AUSGANG_TEMP = 6053  # temp_vts_r
HEIZ_NORMAL_TEMP_M1 = 82  # konf_raumsolltemp_rw
HEIZ_NORMAL_TEMP_M2 = 83  # konf_raumsolltemp_rw
HEIZ_PARTY_TEMP_M1 = 79  # konf_partysolltemp_rw
HEIZ_PARTY_TEMP_M2 = 80  # konf_partysolltemp_rw
HEIZ_REDUZIERT_TEMP_M1 = 85  # konf_raumsolltemp_reduziert_rw
HEIZ_REDUZIERT_TEMP_M2 = 86  # konf_raumsolltemp_reduziert_rw
HEISSWASSER_SOLL_TEMP = 51  # konf_ww_solltemp_rw
ANZAHL_BRENNERSTUNDEN = 104  # anzahl_brennerstunden_r
BRENNER_STATUS = 600  # zustand_brenner_r
ANZAHL_BRENNER_STARTS = 111  # anzahl_brennerstart_r
INTERNER_PUMPEN_STATUS = 245  # zustand_interne_pumpe_r
HEIZ_PUMPEN_STATUS_M1 = 729  # zustand_heizkreispumpe_r
HEIZ_PUMPEN_STATUS_M2 = 730  # zustand_heizkreispumpe_r
ZIRK_PUMPEN_STATUS = 7181  # zustand_zirkulationspumpe_r
PARTY_MODUS_M1 = 7855  # konf_partybetrieb_rw
PARTY_MODUS_M2 = 7856  # konf_partybetrieb_rw
ENERGIE_SPARMODUS_M1 = 7852  # konf_sparbetrieb_rw
ENERGIE_SPARMODUS_M2 = 7853  # konf_sparbetrieb_rw
DATUM_UHRZEIT = 5385  # konf_uhrzeit_rw
AKTUELLER_FEHLER = 7184  # aktuelle_fehler_r
FERIEN_START_M1 = 306  # konf_ferien_start_rw
FERIEN_START_M2 = 307  # konf_ferien_start_rw
FERIEN_ENDE_M1 = 309  # konf_ferien_ende_rw
FERIEN_ENDE_M2 = 310  # konf_ferien_ende_rw
ZUSTAND_FERIEN_PROG_M1 = 714  # zustand_ferienprogramm_r
ZUSTAND_FERIEN_PROG_M2 = 715  # zustand_ferienprogramm_r
AKTUELLE_BETRIEBSART_M1 = 708  # aktuelle_betriebsart_r
AKTUELLE_BETRIEBSART_M2 = 709  # aktuelle_betriebsart_r
ZUSTAND_FROSTGEFAHR_M1 = 717  # zustand_frostgefahr_r
ZUSTAND_FROSTGEFAHR_M2 = 718  # zustand_frostgefahr_r
BETRIEBSART_M1 = 92  # konf_betriebsart_rw
BETRIEBSART_M2 = 94  # konf_betriebsart_rw
NEIGUNG_M1 = 2869  # konf_neigung_rw
NEIGUNG_M2 = 2871  # konf_neigung_rw
NIVEAU_M1 = 2875  # konf_niveau_rw
NIVEAU_M2 = 2877  # konf_niveau_rw
HEIZUNGSSCHEMA = 801  # konf_heizungsschema_r

# ---------------------------------------------------------------------------
# Shared enum types
# ---------------------------------------------------------------------------
AUS_EIN = enum_type(("Aus", "Ein"))
INAKTIV_AKTIV = enum_type(("inaktiv", "aktiv"))
PUMPEN_STATUS = enum_type(("Aus", "Ein", "Aus2", "Ein2"))
AKTUELLE_BETRIEBSART = enum_type(
    ("Abschaltbetrieb", "Reduzierter Betrieb", "Normalbetrieb", "Dauernd Normalbetrieb")
)
BETRIEBSART = enum_type(
    ("Abschalt", "Nur WW", "Heizen + WW", "Dauernd Reduziert", "Dauernd Normal")
)
# Code 0 is unused by the controller.
HEIZUNGSSCHEMA_TYPE = enum_type(
    (
        "",
        "1 A1",
        "2 A1 + WW",
        "3 M2",
        "4 M2 + WW",
        "5 A1 + M2",
        "6 A1 + M2 + WW",
        "7 M2 + M3",
        "8 M2 + M3 + WW",
        "9 A1 + M2 + M3",
        "10 A1 + M2 + M3 + WW",
    )
)

_RO = AttrAccess.READ_ONLY
_RW = AttrAccess.READ_WRITE

# =============================================================================
# BUILT-IN ATTRIBUTES
# =============================================================================
BUILTIN_ATTRIBUTES: dict[int, AttrRef] = {
    # =========================================================================
    # TEMPERATURES (read-only sensors)
    # =========================================================================
    AUSSEN_TEMP: AttrRef(TYPE_DOUBLE, _RO, "AussenTemp", "Außen Temperatur"),
    ABGAS_TEMP: AttrRef(TYPE_DOUBLE, _RO, "AbgasTemp", "Abgas Temperatur"),
    BOILER_TEMP: AttrRef(TYPE_DOUBLE, _RO, "BoilerTemp", "Boiler Temperatur"),
    HEISSWASSER_TEMP: AttrRef(TYPE_DOUBLE, _RO, "HeisswasserTemp", "Heißwasser Temperatur"),
    HEISSWASSER_AUSGANG_TEMP: AttrRef(
        TYPE_DOUBLE, _RO, "HeisswasserAusgangTemp", "Heißwasser Ausgangstemperatur"
    ),
    HEIZWASSER_AUSGANG_TEMP: AttrRef(
        TYPE_DOUBLE, _RO, "HeizwasserAusgangTemp", "Heizwasser Ausgangstemperatur"
    ),
    # =========================================================================
    # SET POINTS
    # =========================================================================
    HEIZ_NORMAL_TEMP_M1: AttrRef(
        TYPE_DOUBLE, _RW, "HeizNormalTempM1", "Normale Raumsolltemperatur Heizkörper"
    ),
    HEIZ_NORMAL_TEMP_M2: AttrRef(
        TYPE_DOUBLE, _RW, "HeizNormalTempM2", "Normale Raumsolltemperatur Fußbodenheizung"
    ),
    HEIZ_PARTY_TEMP_M1: AttrRef(
        TYPE_DOUBLE, _RW, "HeizPartyTempM1", "Party Raumtemperatur Heizkörper"
    ),
    HEIZ_PARTY_TEMP_M2: AttrRef(
        TYPE_DOUBLE, _RW, "HeizPartyTempM2", "Party Raumtemperatur Fußbodenheizung"
    ),
    HEIZ_REDUZIERT_TEMP_M1: AttrRef(
        TYPE_DOUBLE, _RW, "HeizReduziertTempM1", "Reduzierte Raumtemperatur Heizkörper"
    ),
    HEIZ_REDUZIERT_TEMP_M2: AttrRef(
        TYPE_DOUBLE, _RW, "HeizReduziertTempM2", "Reduzierte Raumtemperatur Fußbodenheizung"
    ),
    HEISSWASSER_SOLL_TEMP: AttrRef(
        TYPE_DOUBLE, _RW, "HeisswasserSollTemp", "Solltemperatur Warmwasser"
    ),
    # =========================================================================
    # BURNER
    # =========================================================================
    ANZAHL_BRENNERSTUNDEN: AttrRef(
        TYPE_DOUBLE, _RO, "AnzahlBrennerstunden", "Brennerstundenanzahl"
    ),
    BRENNER_STATUS: AttrRef(AUS_EIN, _RO, "BrennerStatus", "Brenner Status"),
    ANZAHL_BRENNER_STARTS: AttrRef(
        TYPE_DOUBLE, _RW, "AnzahlBrennerStarts", "Anzahl von Brennerstarts"
    ),
    # =========================================================================
    # PUMPS
    # =========================================================================
    INTERNER_PUMPEN_STATUS: AttrRef(
        PUMPEN_STATUS, _RO, "InternerPumpenStatus", "Interner Pumpen Status"
    ),
    HEIZ_PUMPEN_STATUS_M1: AttrRef(
        AUS_EIN, _RO, "HeizPumpenStatusM1", "Zustand Heizkreispumpe Heizkörper"
    ),
    HEIZ_PUMPEN_STATUS_M2: AttrRef(
        AUS_EIN, _RO, "HeizPumpenStatusM2", "Zustand Heizkreispumpe Fußbodenheizung"
    ),
    ZIRK_PUMPEN_STATUS: AttrRef(AUS_EIN, _RO, "ZirkPumpenStatus", "Zustand Zirkulationspumpe"),
    # =========================================================================
    # MODES
    # =========================================================================
    PARTY_MODUS_M1: AttrRef(AUS_EIN, _RW, "PartyModusM1", "Partymodus Heizkörper"),
    PARTY_MODUS_M2: AttrRef(AUS_EIN, _RW, "PartyModusM2", "Partymodus Fußbodenheizung"),
    ENERGIE_SPARMODUS_M1: AttrRef(
        AUS_EIN, _RW, "EnergieSparmodusM1", "Energiesparmodus Heizkörper"
    ),
    ENERGIE_SPARMODUS_M2: AttrRef(
        AUS_EIN, _RW, "EnergieSparmodusM2", "Energiesparmodus Fußbodenheizung"
    ),
    AKTUELLE_BETRIEBSART_M1: AttrRef(
        AKTUELLE_BETRIEBSART, _RO, "AktuelleBetriebsartM1", "Betriebsart Heizkörper"
    ),
    AKTUELLE_BETRIEBSART_M2: AttrRef(
        AKTUELLE_BETRIEBSART, _RO, "AktuelleBetriebsartM2", "Betriebsart Fußbodenheizung"
    ),
    BETRIEBSART_M1: AttrRef(BETRIEBSART, _RW, "BetriebsartM1", "Betriebsart Heizkörper"),
    BETRIEBSART_M2: AttrRef(
        BETRIEBSART, _RW, "konf_betriebsart_rw-0x005e", "Betriebsart Fussbodenheizung"
    ),
    # =========================================================================
    # SYSTEM
    # =========================================================================
    DATUM_UHRZEIT: AttrRef(TYPE_DATE, _RW, "DatumUhrzeit", "Aktuelles Datum mit Uhrzeit"),
    AKTUELLER_FEHLER: AttrRef(TYPE_STRING, _RO, "AktuellerFehler", "Fehlermeldung"),
    HEIZUNGSSCHEMA: AttrRef(
        HEIZUNGSSCHEMA_TYPE, _RO, "Heizungsschema", "Heizungsschema für Anlage"
    ),
    # =========================================================================
    # HOLIDAY PROGRAM
    # =========================================================================
    FERIEN_START_M1: AttrRef(
        TYPE_DATE, _RW, "FerienStartM1", "Start der Ferienzeit für Heizkörper"
    ),
    FERIEN_START_M2: AttrRef(
        TYPE_DATE, _RW, "FerienStartM2", "Start der Ferienzeit für Fußbodenheizung"
    ),
    FERIEN_ENDE_M1: AttrRef(TYPE_DATE, _RW, "FerienEndeM1", "Ende der Ferienzeit für Heizkörper"),
    FERIEN_ENDE_M2: AttrRef(
        TYPE_DATE, _RW, "FerienEndeM2", "Ende der Ferienzeit für Fußbodenheizung"
    ),
    ZUSTAND_FERIEN_PROG_M1: AttrRef(
        INAKTIV_AKTIV, _RO, "ZustandFerienProgM1", "Zustand Ferienprogramm Heizkörper"
    ),
    ZUSTAND_FERIEN_PROG_M2: AttrRef(
        INAKTIV_AKTIV, _RO, "ZustandFerienProgM2", "Zustand Ferienprogramm Fußbodenheizung"
    ),
    # =========================================================================
    # FROST PROTECTION
    # =========================================================================
    ZUSTAND_FROSTGEFAHR_M1: AttrRef(
        INAKTIV_AKTIV, _RO, "ZustandFrostgefahrM1", "Zustand Frostgefahr Heizkörper"
    ),
    ZUSTAND_FROSTGEFAHR_M2: AttrRef(
        INAKTIV_AKTIV, _RO, "ZustandFrostgefahrM2", "Zustand Frostgefahr Fußbodenheizung"
    ),
    # =========================================================================
    # HEATING CURVE
    # =========================================================================
    NEIGUNG_M1: AttrRef(TYPE_DOUBLE, _RW, "NeigungM1", "Neigung Heizkörper"),
    NEIGUNG_M2: AttrRef(TYPE_DOUBLE, _RW, "NeigungM2", "Neigung Fußbodenheizung"),
    NIVEAU_M1: AttrRef(TYPE_DOUBLE, _RW, "NiveauM1", "Niveau Heizkörper"),
    NIVEAU_M2: AttrRef(TYPE_DOUBLE, _RW, "NiveauM2", "Niveau Fußbodenheizung"),
}

__all__ = [
    "BUILTIN_ATTRIBUTES",
    "NO_ATTR",
    "AUSSEN_TEMP",
    "ABGAS_TEMP",
    "BOILER_TEMP",
    "HEISSWASSER_TEMP",
    "HEISSWASSER_AUSGANG_TEMP",
    "HEIZWASSER_AUSGANG_TEMP",
    "HEIZ_NORMAL_TEMP_M1",
    "HEIZ_NORMAL_TEMP_M2",
    "HEIZ_PARTY_TEMP_M1",
    "HEIZ_PARTY_TEMP_M2",
    "HEIZ_REDUZIERT_TEMP_M1",
    "HEIZ_REDUZIERT_TEMP_M2",
    "HEISSWASSER_SOLL_TEMP",
    "ANZAHL_BRENNERSTUNDEN",
    "BRENNER_STATUS",
    "ANZAHL_BRENNER_STARTS",
    "INTERNER_PUMPEN_STATUS",
    "HEIZ_PUMPEN_STATUS_M1",
    "HEIZ_PUMPEN_STATUS_M2",
    "ZIRK_PUMPEN_STATUS",
    "PARTY_MODUS_M1",
    "PARTY_MODUS_M2",
    "ENERGIE_SPARMODUS_M1",
    "ENERGIE_SPARMODUS_M2",
    "DATUM_UHRZEIT",
    "AKTUELLER_FEHLER",
    "FERIEN_START_M1",
    "FERIEN_START_M2",
    "FERIEN_ENDE_M1",
    "FERIEN_ENDE_M2",
    "ZUSTAND_FERIEN_PROG_M1",
    "ZUSTAND_FERIEN_PROG_M2",
    "AKTUELLE_BETRIEBSART_M1",
    "AKTUELLE_BETRIEBSART_M2",
    "ZUSTAND_FROSTGEFAHR_M1",
    "ZUSTAND_FROSTGEFAHR_M2",
    "BETRIEBSART_M1",
    "BETRIEBSART_M2",
    "NEIGUNG_M1",
    "NEIGUNG_M2",
    "NIVEAU_M1",
    "NIVEAU_M2",
    "HEIZUNGSSCHEMA",
    # Shared enum types
    "AUS_EIN",
    "INAKTIV_AKTIV",
    "PUMPEN_STATUS",
    "AKTUELLE_BETRIEBSART",
    "BETRIEBSART",
    "HEIZUNGSSCHEMA_TYPE",
]
