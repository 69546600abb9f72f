"""Shared pytest configuration for daedoc tests."""

import pytest

SAMPLE = """
/// Sets up the visual of an NPC
///
/// @param npc NPC to be affected
/// @param body_mesh mesh to be used as the body e.g. `HUN_BODY_NAKED0`
/// @param body_tex body texture assigned to this body mesh
/// @param skin body texture variant
/// @param head_mesh head mesh
/// @param head_tex head texture
/// @param teeth_tex teeth texture
/// @param armor_inst armor (C_ITEM instance) to be equipped or `-1` for no armor
func void Mdl_SetVisualBody( var instance npc,
                            var string body_mesh,
                            var int body_tex,
                            var int skin,
                            var string head_mesh,
                            var int head_tex,
                            var int teeth_tex,
                            var int armor_inst ) {};


/// Display the document using the document manager ID
///
/// @param docID document manager ID
func void Doc_Show(var int docID) {};


/// Create a new instance of the document manager with the arrow showing players position on the map and returns its ID.
///
/// @return Returns the ID of the document manager instance.
func int Doc_CreateMap() {};
"""


@pytest.fixture
def sample():
    return SAMPLE


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "Externals.d"
    path.write_text(SAMPLE, encoding="utf-8")
    return path
