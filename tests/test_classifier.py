import scriptpdf.classifier as cl
import scriptpdf.screenplay as screenplay
import u

# test classifier

def testEmpty():
    assert cl.classify("") == cl.EMPTY
    assert cl.classify("    ") == cl.EMPTY
    assert cl.classify(" \t ") == cl.EMPTY
    assert cl.classify("", "MICHAEL") == cl.EMPTY

def testScene():
    assert cl.classify("INT. COFFEE SHOP - DAY") == cl.SCENE
    assert cl.classify("EXT. PARK") == cl.SCENE
    assert cl.classify("INT/EXT. CAR - NIGHT") == cl.SCENE
    assert cl.classify("I/E. CAR - CONTINUOUS") == cl.SCENE
    assert cl.classify("  INT. KITCHEN - LATER") == cl.SCENE
    assert cl.classify("INT HALLWAY") == cl.SCENE

    # must be in upper case
    assert cl.classify("int. coffee shop - day") == cl.ACTION
    assert cl.classify("Int. Coffee shop") == cl.ACTION

    # the prefix must be a word of its own
    assert cl.classify("INTO THE NIGHT") != cl.SCENE
    assert cl.classify("EXTRA LARGE FRIES", "  Please.") != cl.SCENE

def testSceneWinsOverCharacter():
    assert cl.classify("INT. HOUSE", "(beat)") == cl.SCENE
    assert cl.classify("EXT. BARN", "  Hello.") == cl.SCENE

def testTransition():
    assert cl.classify("FADE OUT:") == cl.TRANSITION
    assert cl.classify("FADE IN:") == cl.TRANSITION
    assert cl.classify("FADE TO BLACK:") == cl.TRANSITION
    assert cl.classify("CUT TO:") == cl.TRANSITION
    assert cl.classify("DISSOLVE TO:") == cl.TRANSITION
    assert cl.classify("MATCH CUT TO:") == cl.TRANSITION
    assert cl.classify("CONTINUED:") == cl.TRANSITION
    assert cl.classify("      CUT TO:", "MICHAEL") == cl.TRANSITION

    assert cl.classify("cut to:") == cl.ACTION
    assert cl.classify("CUT TO") != cl.TRANSITION

    # not a known transition, and too colon-terminated to be a name
    assert cl.classify("SMASH CUT TO:") == cl.ACTION

def testParen():
    assert cl.classify("(whispering)") == cl.PAREN
    assert cl.classify("    (beat)") == cl.PAREN
    assert cl.classify("(O.S.)", "  Hi.") == cl.PAREN

    assert cl.classify("(whispering") != cl.PAREN
    assert cl.classify("He sighs (quietly)") == cl.ACTION

def testCharacter():
    assert cl.classify("MICHAEL", "(whispering)") == cl.CHARACTER
    assert cl.classify("MICHAEL", "  I'll have a latte.") == cl.CHARACTER
    assert cl.classify("MICHAEL", "I'll have a latte.") == cl.CHARACTER
    assert cl.classify("MR. SMITH (V.O.)", "  Hello?") == cl.CHARACTER
    assert cl.classify("    SARAH", "  Hi.") == cl.CHARACTER

    # last line of the input
    assert cl.classify("MICHAEL") == cl.CHARACTER
    assert cl.classify("MICHAEL", None) == cl.CHARACTER

def testCharacterNeedsFollowup():
    assert cl.classify("MICHAEL", "") == cl.ACTION
    assert cl.classify("MICHAEL", "   ") == cl.ACTION
    assert cl.classify("MICHAEL", "INT. HOUSE - DAY") == cl.ACTION
    assert cl.classify("MICHAEL", "ext. garden") == cl.ACTION

def testCharacterLimits():
    # too long for a name
    s = "THE BUILDING EXPLODES IN A HUGE BALL OF FIRE"
    assert len(s) >= 35
    assert cl.classify(s, "Everyone runs.") == cl.ACTION

    assert cl.classify("A" * 34, "  Hi.") == cl.CHARACTER
    assert cl.classify("A" * 35, "  Hi.") == cl.ACTION

    # needs at least one letter
    assert cl.classify("123", "  Hi.") == cl.ACTION
    assert cl.classify("...", "  Hi.") == cl.ACTION

    # looks like a scene heading in the middle
    assert cl.classify("BOB AT INT. HOUSE", "  Hi.") == cl.ACTION
    assert cl.classify("BOB AT EXT. HOUSE", "  Hi.") == cl.ACTION

def testDialogue():
    assert cl.classify("  I'll have a latte.") == cl.DIALOGUE
    assert cl.classify("        Whatever you say.") == cl.DIALOGUE

    # one space is not enough
    assert cl.classify(" I'll have a latte.") == cl.ACTION
    assert cl.classify("I'll have a latte.") == cl.ACTION

def testAction():
    assert cl.classify("Michael walks in.") == cl.ACTION
    assert cl.classify("The door opens.", "MICHAEL") == cl.ACTION

def testDialogueIndent():
    c = cl.Classifier(dialogueIndent = 4)

    assert c.classify("  Hi.") == cl.ACTION
    assert c.classify("    Hi.") == cl.DIALOGUE

    c = cl.Classifier(dialogueIndent = 0)

    assert c.classify("  Hi.") == cl.ACTION
    assert c.classify("(beat)") == cl.PAREN

def testFromConfig():
    cfg = u.cfg()
    cfg.characterMaxLength = 5
    cfg.dialogueIndent = 0

    c = cl.Classifier.fromConfig(cfg)

    assert c.characterMaxLength == 5
    assert c.dialogueIndent == 0
    assert c.classify("BOB", "  Hi.") == cl.CHARACTER
    assert c.classify("MICHAEL", "  Hi.") == cl.ACTION
    assert c.classify("  Hi.") == cl.ACTION

def testSubclass():
    class MyClassifier(cl.Classifier):
        def isTransition(self, s):
            return cl.Classifier.isTransition(self, s) or \
                (s == "SMASH CUT TO:")

    c = MyClassifier()

    assert c.classify("SMASH CUT TO:") == cl.TRANSITION
    assert c.classify("CUT TO:") == cl.TRANSITION
    assert cl.classify("SMASH CUT TO:") == cl.ACTION

def testKindName():
    assert cl.kindName(cl.SCENE) == "SceneHeading"
    assert cl.kindName(cl.CHARACTER) == "Character"
    assert cl.kindName(cl.EMPTY) == "Empty"
    assert cl.kindName(1234) == "Unknown"

# only literal spaces count as indentation. tabs in a script are expanded
# to spaces before its lines are classified.
def testTabs():
    assert cl.classify("\tHello there.") == cl.ACTION
    assert cl.classify("\t(beat)") == cl.PAREN

    ls = screenplay.splitLines("\tHello there.")
    assert ls[0].raw == "    Hello there."
    assert cl.classify(ls[0].raw) == cl.DIALOGUE

    assert u.loadString("\tHello there.").getKinds() == [cl.DIALOGUE]
